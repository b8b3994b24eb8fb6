# DEPENDENCIES
import re
import sys
import anyio
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_error
from utils.logger import RiskEngineLogger
from services.data_models import Deviation
from services.data_models import Violation
from model_manager.llm_manager import LLMManager
from services.data_models import RoleExplanation
from services.data_models import ClauseExplanation
from model_manager.llm_manager import strip_think_blocks


LANGUAGES = {"en" : "English",
             "hi" : "Hindi",
            }

COMPANY_FALLBACK = RoleExplanation(simple           = "This clause may face legal challenges under Indian law.",
                                   real_life_impact = "Review with legal counsel before relying on this provision.",
                                  )

FREELANCER_FALLBACK_IMPACT = "This clause may put you at a significant disadvantage. Consider negotiating better terms."


def static_explanation(violation: Violation) -> ClauseExplanation:
    """
    Explanation built from the violation's own catalog text
    """
    return ClauseExplanation(freelancer = RoleExplanation(simple           = violation.explanation,
                                                          real_life_impact = FREELANCER_FALLBACK_IMPACT,
                                                         ),
                             company    = COMPANY_FALLBACK,
                             source     = "static",
                            )


class ExplanationProvider:
    """
    Turns a flagged clause into freelancer and company readings

    `explain` returns {"freelancer": {"simple", "realLifeImpact"}, "company": {"simple", "realLifeImpact"}} and raises on failure
    """
    name = "provider"

    def explain(self, clause_text: str, violation_type: str, statute_text: str, language: str = "en") -> Dict[str, Dict[str, str]]:
        raise NotImplementedError


class StaticExplanationProvider(ExplanationProvider):
    """
    Pre-written readings selected by clause topic
    """
    name   = "static"

    # (trigger words, freelancer (simple, impact), company (simple, impact)), first hit wins
    TOPICS = [(("compete", "competitor"),
               ("Non-compete clauses are generally void in India under Section 27 of the Contract Act.",
                "You likely cannot be legally forced to stop working for competitors after leaving."),
               ("Restraint of trade clauses are void under Section 27 unless for sale of goodwill.",
                "Enforcing this against a former employee is legally difficult in India.")),
              (("indemn", "liability", "liable"),
               ("Unlimited liability means you could be personally responsible for massive damages.",
                "This could put your personal assets at risk. Always ask for a liability cap."),
               ("Demanding unlimited indemnity may be considered unconscionable.",
                "Courts may limit liability to reasonable foreseeability under Section 73.")),
              (("terminate", "notice"),
               ("Immediate termination without cause creates job insecurity.",
                "Ensure you have a reasonable notice period (e.g., 30 days) to find new work."),
               ("Termination clauses must be fair and reciprocal to avoid disputes.",
                "Arbitrary termination can lead to wrongful termination claims.")),
              (("penalty", "damages"),
               ("Fixed penalties clearly exceeding actual loss may be void under Section 74.",
                "You should only be liable for actual proven losses, not arbitrary penalty amounts."),
               ("Penalty clauses are only enforceable as reasonable compensation (Section 74).",
                "Exorbitant penalty amounts are likely to be struck down by courts.")),
             ]

    GENERIC = (("This clause contains legal obligations that affect your rights.",
                "Review this carefully. If it feels unfair, request a modification."),
               ("This provision should be drafted carefully to ensure enforceability.",
                "Ambiguous or unfair terms may be ruled against the drafter (contra proferentem)."))

    def explain(self, clause_text: str, violation_type: str, statute_text: str, language: str = "en") -> Dict[str, Dict[str, str]]:
        lowered             = clause_text.lower()
        freelancer, company = self.GENERIC

        for triggers, topic_freelancer, topic_company in self.TOPICS:
            if any(trigger in lowered for trigger in triggers):
                freelancer, company = topic_freelancer, topic_company
                break

        return {"freelancer" : {"simple" : freelancer[0], "realLifeImpact" : freelancer[1]},
                "company"    : {"simple" : company[0], "realLifeImpact" : company[1]},
               }


class OllamaExplanationProvider(ExplanationProvider):
    """
    Readings generated by the local LLM
    """
    name   = "ollama"

    SCHEMA = """{
  "freelancer": {"simple": "2-3 sentences from the worker's perspective about risks", "realLifeImpact": "Specific impact on their income/career"},
  "company":    {"simple": "2-3 sentences from the employer's perspective about enforceability", "realLifeImpact": "Specific business/legal risk"}
}"""

    def __init__(self, llm_manager: Optional[LLMManager] = None):
        self.llm_manager = llm_manager or LLMManager()


    def explain(self, clause_text: str, violation_type: str, statute_text: str, language: str = "en") -> Dict[str, Dict[str, str]]:
        prompt = (f"You are a legal expert explaining contract clauses.\n\n"
                  f"CONTEXT: Indian Contract Act, 1872 applies, not US law. Non-compete clauses are void in India (Section 27).\n\n"
                  f"CLAUSE TYPE: {violation_type}\n"
                  f"CLAUSE: \"{clause_text[:400]}\"\n"
                  f"INDIAN LAW: {statute_text[:300]}\n\n"
                  f"Explain the clause for a freelancer and for the company in {LANGUAGES.get(language, 'English')}, "
                  f"in everyday language without legal jargon, citing the section number."
                 )

        parsed = self.llm_manager.generate_structured_json(prompt = prompt, schema_description = self.SCHEMA)

        for role in ("freelancer", "company"):
            if not isinstance(parsed.get(role), dict):
                raise ValueError(f"Incomplete explanation: missing '{role}'")

        return parsed


def _role_from_dict(data: Dict[str, Any], fallback: RoleExplanation) -> RoleExplanation:
    simple = data.get("simple") or data.get("simpleExplanation") or fallback.simple
    impact = data.get("realLifeImpact") or data.get("real_life_impact") or fallback.real_life_impact

    return RoleExplanation(simple = str(simple), real_life_impact = str(impact))


class ClauseExplainer:
    """
    Enrichment fan-out: one provider call per violation, each isolated from the others
    """
    EXCERPT_KEYWORDS = {"Payment Terms"          : ["payment", "net ", "invoice", "payable", "remittance"],
                        "Termination Notice"     : ["termination", "terminate", "notice period", "cancel"],
                        "Liability Cap"          : ["liability", "damages", "indemnify", "responsible"],
                        "Working Hours"          : ["hours", "work week", "availability", "working"],
                        "Confidentiality Period" : ["confidential", "nda", "non-disclosure", "secret"],
                        "Jurisdiction"           : ["jurisdiction", "governing law", "courts", "arbitration"],
                       }

    MAX_SUMMARY_LENGTH = 400


    def __init__(self, provider: Optional[ExplanationProvider] = None, llm_manager: Optional[LLMManager] = None):
        """
        Arguments:
        ----------
            provider    { ExplanationProvider } : Clause explanation source (default: Ollama-backed provider)

            llm_manager { LLMManager }          : Used for deviation summaries (default: the provider's manager, or a new one)
        """
        self.provider    = provider or OllamaExplanationProvider(llm_manager)
        self.llm_manager = llm_manager or getattr(self.provider, "llm_manager", None)


    def explain(self, violation: Violation, language: str = "en") -> ClauseExplanation:
        """
        Explanation for one violation; any provider failure yields the static explanation
        """
        fallback = static_explanation(violation)

        try:
            parsed = self.provider.explain(clause_text    = violation.clause_text,
                                           violation_type = violation.violation_type,
                                           statute_text   = violation.section_full_text,
                                           language       = language,
                                          )

            return ClauseExplanation(freelancer = _role_from_dict(parsed["freelancer"], fallback.freelancer),
                                     company    = _role_from_dict(parsed["company"], fallback.company),
                                     source     = self.provider.name,
                                    )

        except Exception as e:
            log_error(e, context = {"component"      : "ClauseExplainer",
                                    "operation"      : "explain",
                                    "clause_id"      : violation.clause_id,
                                    "violation_type" : violation.violation_type,
                                   })
            return fallback


    @RiskEngineLogger.log_execution_time("explain_violations")
    async def explain_all(self, violations: List[Violation], language: str = "en") -> List[ClauseExplanation]:
        """
        Explain every violation concurrently

        Arguments:
        ----------
            violations { list } : Violations to explain

            language   { str }  : "en" or "hi"

        Returns:
        --------
                       { list } : One ClauseExplanation per violation, in input order
        """
        results : List[Optional[ClauseExplanation]] = [None] * len(violations)

        async def _explain_one(index: int, violation: Violation):
            results[index] = await anyio.to_thread.run_sync(self.explain, violation, language)

        async with anyio.create_task_group() as task_group:
            for index, violation in enumerate(violations):
                task_group.start_soon(_explain_one, index, violation)

        fallbacks = sum(1 for explanation in results if explanation.source == "static")

        log_info("Violation explanations generated",
                 violations = len(violations),
                 provider   = self.provider.name,
                 fallbacks  = fallbacks,
                )

        return results


    @classmethod
    def find_excerpt(cls, text: str, category: str) -> Optional[str]:
        """
        Contract text around the first keyword of a deviation category: 100 characters before, 200 after
        """
        lowered = text.lower()

        for keyword in cls.EXCERPT_KEYWORDS.get(category, []):
            index = lowered.find(keyword)

            if (index != -1):
                return text[max(0, index - 100):min(len(text), index + len(keyword) + 200)]

        return None


    def summarize_deviation(self, deviation: Deviation, excerpt: Optional[str] = None) -> str:
        """
        Two or three plain-language sentences on a deviation; falls back to its template explanation
        """
        lines = [f"Issue Category: {deviation.category}",
                 f"Found in Contract: {deviation.found_in_contract}",
                 f"Fair Standard: {deviation.fair_standard}",
                 f"Severity: {deviation.deviation_level.value}",
                ]

        if deviation.legal_reference:
            lines.append(f"Legal Reference: {deviation.legal_reference}")

        if excerpt:
            lines.append(f"Contract Excerpt: \"{excerpt[:300]}...\"")

        prompt = ("You are a legal expert specializing in Indian Contract Law. Explain this contract issue in simple terms:\n\n"
                  + "\n".join(lines)
                  + "\n\nProvide a brief (2-3 sentences) plain-language explanation of what this means for the person signing "
                    "and what they should do about it. Be concise and practical. Do not use legal jargon."
                 )

        if self.llm_manager is None:
            return deviation.explanation

        response = self.llm_manager.complete(prompt = prompt, max_tokens = 200, temperature = 0.3)

        if not response.success:
            return deviation.explanation

        summary  = strip_think_blocks(response.text)

        if (len(summary) > self.MAX_SUMMARY_LENGTH):
            sentences = [sentence.strip() for sentence in re.split(r'[.!?]+', summary) if sentence.strip()]
            summary   = ". ".join(sentences[:3]) + "."

        return summary or deviation.explanation


    @RiskEngineLogger.log_execution_time("summarize_deviations")
    async def summarize_deviations(self, deviations: List[Deviation], contract_text: Optional[str] = None) -> List[Deviation]:
        """
        Attach an LLM summary to every deviation, concurrently; the deviations are updated in place and returned
        """
        async def _summarize_one(deviation: Deviation):
            excerpt = self.find_excerpt(contract_text, deviation.category) if contract_text else None

            try:
                deviation.summary = await anyio.to_thread.run_sync(self.summarize_deviation, deviation, excerpt)

            except Exception as e:
                log_error(e, context = {"component" : "ClauseExplainer", "operation" : "summarize_deviation", "category" : deviation.category})
                deviation.summary = deviation.explanation

        async with anyio.create_task_group() as task_group:
            for deviation in deviations:
                task_group.start_soon(_summarize_one, deviation)

        log_info("Deviation summaries generated", deviations = len(deviations))

        return deviations
