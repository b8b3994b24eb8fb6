# DEPENDENCIES
import pytest

from config.risk_rules import DeviationLevel
from services.data_models import Violation
from services.data_models import Deviation
from model_manager.llm_manager import LLMResponse
from services.clause_explainer import ClauseExplainer
from services.clause_explainer import static_explanation
from services.clause_explainer import OllamaExplanationProvider
from services.clause_explainer import StaticExplanationProvider


class StubLLM:
    """
    Returns canned completions and records prompts
    """
    def __init__(self, text = "", success = True, structured = None):
        self.text       = text
        self.success    = success
        self.structured = structured
        self.prompts    = list()

    def complete(self, prompt, **kwargs):
        self.prompts.append(prompt)

        return LLMResponse(text            = self.text,
                           provider        = "ollama",
                           model           = "stub",
                           tokens_used     = 0,
                           latency_seconds = 0.0,
                           success         = self.success,
                           error_message   = None if self.success else "offline",
                          )

    def generate_structured_json(self, prompt, schema_description, **kwargs):
        self.prompts.append(prompt)

        if self.structured is None:
            raise ValueError("no JSON in response")

        return self.structured


def make_violation(text = "The Contractor shall not compete with the Client.", clause_id = 1):
    return Violation(clause_id         = clause_id,
                     clause_text       = text,
                     violation_type    = "non_compete_section27",
                     section_number    = "Section 27",
                     section_title     = "Agreement in restraint of trade, void",
                     section_full_text = "Every agreement by which any one is restrained from exercising a lawful profession...",
                     risk_level        = "CRITICAL",
                     risk_score        = 45,
                     explanation       = "Non-compete clauses are void in India under Section 27.",
                    )


PAYMENT_DEVIATION = Deviation(category          = "Payment Terms",
                              found_in_contract = "Net 120 days",
                              fair_standard     = "Net 30 days",
                              deviation_level   = DeviationLevel.EXTREME,
                              explanation       = "Payment terms of 120 days are 90 days longer than the fair standard.",
                              legal_reference   = "Section 73: Compensation for Breach",
                             )


def test_static_explanation_uses_catalog_text():
    explanation = static_explanation(make_violation())

    assert explanation.source == "static"
    assert explanation.freelancer.simple == "Non-compete clauses are void in India under Section 27."


def test_static_provider_picks_topic_or_generic():
    provider = StaticExplanationProvider()

    liability = provider.explain("The Contractor is liable for all losses.", "unlimited_liability_section73", "")
    generic   = provider.explain("Deliverables are described in Schedule B.", "vague_scope", "")

    assert liability["freelancer"]["simple"].startswith("Unlimited liability")
    assert generic["freelancer"]["simple"] == "This clause contains legal obligations that affect your rights."
    assert generic["company"]["realLifeImpact"].endswith("(contra proferentem).")


def test_llm_provider_result_is_used():
    llm       = StubLLM(structured = {"freelancer" : {"simple" : "You can still work.", "realLifeImpact" : "No income loss."},
                                      "company"    : {"simple" : "Hard to enforce.", "realLifeImpact" : "Wasted effort."},
                                     })
    explainer = ClauseExplainer(provider = OllamaExplanationProvider(llm))

    explanation = explainer.explain(make_violation(), language = "hi")

    assert explanation.source == "ollama"
    assert explanation.freelancer.simple == "You can still work."
    assert explanation.company.real_life_impact == "Wasted effort."
    assert "Hindi" in llm.prompts[0]


def test_incomplete_llm_payload_falls_back():
    explainer   = ClauseExplainer(provider = OllamaExplanationProvider(StubLLM(structured = {"freelancer" : {"simple" : "Only one side"}})))
    explanation = explainer.explain(make_violation())

    assert explanation.source == "static"


@pytest.mark.anyio
async def test_explain_all_keeps_input_order():
    explainer  = ClauseExplainer(provider = StaticExplanationProvider())
    violations = [make_violation("The Contractor shall not compete.", 1),
                  make_violation("Liability is unlimited.", 2),
                  make_violation("Either party may terminate.", 3),
                 ]

    explanations = await explainer.explain_all(violations)

    assert [explanation.freelancer.simple.split()[0] for explanation in explanations] == ["Non-compete", "Unlimited", "Immediate"]


def test_find_excerpt_window():
    text    = ("A" * 150) + " payment is due later " + ("B" * 300)
    excerpt = ClauseExplainer.find_excerpt(text, "Payment Terms")

    assert excerpt.startswith(("A" * 99) + " payment")
    assert "payment is due" in excerpt
    assert len(excerpt) == 100 + len("payment") + 200
    assert ClauseExplainer.find_excerpt(text, "Working Hours") is None


def test_summary_is_trimmed_to_three_sentences():
    sentence  = "This is a fairly long sentence about delayed payment terms that keeps going for a while"
    llm       = StubLLM(text = "<think>reasoning</think>" + ". ".join([sentence] * 6) + ".")
    explainer = ClauseExplainer(provider = StaticExplanationProvider(), llm_manager = llm)

    summary   = explainer.summarize_deviation(PAYMENT_DEVIATION, excerpt = "Payment within 120 days.")

    assert summary == ". ".join([sentence] * 3) + "."
    assert "Contract Excerpt" in llm.prompts[0]
    assert "Legal Reference: Section 73" in llm.prompts[0]


def test_summary_falls_back_on_failed_call():
    explainer = ClauseExplainer(provider = StaticExplanationProvider(), llm_manager = StubLLM(success = False))

    assert explainer.summarize_deviation(PAYMENT_DEVIATION) == PAYMENT_DEVIATION.explanation


@pytest.mark.anyio
async def test_summarize_deviations_fills_every_summary():
    deviation = Deviation(category          = "Jurisdiction",
                          found_in_contract = "Singapore jurisdiction",
                          fair_standard     = "Indian courts",
                          deviation_level   = DeviationLevel.SIGNIFICANT,
                          explanation       = "Foreign courts make disputes costly.",
                         )
    explainer = ClauseExplainer(provider = StaticExplanationProvider(), llm_manager = StubLLM(text = "Short answer."))

    result    = await explainer.summarize_deviations([deviation], "Disputes go to the courts of Singapore.")

    assert result[0].summary == "Short answer."
