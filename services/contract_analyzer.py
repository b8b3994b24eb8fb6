# DEPENDENCIES
import sys
import time
import anyio
import functools
from typing import Any
from typing import Dict
from typing import List
from typing import Union
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_error
from utils.logger import log_warning
from config.settings import settings
from config.risk_rules import RiskRules
from config.risk_rules import ScoringMode
from services.data_models import Clause
from utils.logger import RiskEngineLogger
from services.risk_scorer import get_risk_level
from utils.text_processor import TextProcessor
from utils.validators import ContractValidator
from services.data_models import SemanticResult
from services.data_models import AnalysisReport
from services.data_models import ContractContext
from services.data_models import CombinedViolation
from model_manager.model_cache import EmbeddingCache
from services.result_merger import merge_results
from services.clause_explainer import ClauseExplainer
from services.risk_scorer import ContextAwareScorer
from services.risk_scorer import calculate_risk_score
from services.clause_explainer import static_explanation
from services.risk_scorer import resolve_scoring_mode
from services.clause_extractor import ClauseSegmenter
from services.result_merger import match_source_breakdown
from services.keyword_validator import KeywordValidator
from services.deviation_checker import DeviationChecker
from services.semantic_validator import SemanticValidator


DISCLAIMER = ("This analysis is generated automatically for informational purposes only and does not constitute legal advice. "
              "Consult a qualified advocate before signing or enforcing any contract.")


class ContractAnalyzer:
    """
    Runs the full clause-risk pipeline on contract text

    Pipeline:
    1. Input validation and clause segmentation
    2. Keyword channel (worker thread) concurrently with the semantic channel
    3. Merge of both channels
    4. Contract-wide deviation check
    5. Scoring (enhanced or legacy)
    6. Optional plain-language explanations
    7. Report assembly with highlight offsets
    """
    def __init__(self, segmenter: Optional[ClauseSegmenter] = None, keyword_validator: Optional[KeywordValidator] = None,
                 semantic_validator: Optional[SemanticValidator] = None, scorer: Optional[ContextAwareScorer] = None,
                 explainer: Optional[ClauseExplainer] = None):
        """
        Arguments:
        ----------
            segmenter          { ClauseSegmenter }    : Clause splitter

            keyword_validator  { KeywordValidator }   : Keyword/regex channel over the static catalog

            semantic_validator { SemanticValidator }  : Vector channel (default: built from settings on first use)

            scorer             { ContextAwareScorer } : Weighted scorer

            explainer          { ClauseExplainer }    : Explanation fan-out (default: built on first use)
        """
        self.segmenter          = segmenter or ClauseSegmenter()
        self.keyword_validator  = keyword_validator or KeywordValidator()
        self.semantic_validator = semantic_validator
        self.scorer             = scorer or ContextAwareScorer()
        self.explainer          = explainer

        log_info("ContractAnalyzer initialized",
                 semantic_configured = semantic_validator is not None,
                 scoring_mode        = settings.SCORING_MODE,
                )


    def _get_semantic_validator(self) -> SemanticValidator:
        if self.semantic_validator is None:
            self.semantic_validator = SemanticValidator.from_settings()

        return self.semantic_validator


    def _get_explainer(self) -> ClauseExplainer:
        if self.explainer is None:
            self.explainer = ClauseExplainer()

        return self.explainer


    @RiskEngineLogger.log_execution_time("analyze_contract")
    async def analyze(self, text: str, context: Union[ContractContext, Dict[str, Any], None] = None, enable_semantic: Optional[bool] = None,
                      scoring_mode: Union[ScoringMode, str, None] = None, language: str = "en", explain: Optional[bool] = None) -> AnalysisReport:
        """
        Analyze one contract

        Arguments:
        ----------
            text            { str }             : Extracted contract text

            context         { ContractContext } : Contract facts, or a camelCase/snake_case dict (default: freelance/general)

            enable_semantic { bool }            : Run the vector channel (default: ENABLE_SEMANTIC)

            scoring_mode    { ScoringMode }     : "enhanced" or "legacy" (default: SCORING_MODE)

            language        { str }             : Explanation language, "en" or "hi"

            explain         { bool }            : Generate LLM explanations (default: ENABLE_EXPLANATIONS)

        Returns:
        --------
                            { AnalysisReport }  : Complete report

        Raises:
        -------
            ValueError                          : Invalid input text (SegmentationError for blank text)
        """
        start_time      = time.time()
        text            = ContractValidator.validate_text(text)
        context         = context if isinstance(context, ContractContext) else ContractContext.from_dict(context)
        mode            = resolve_scoring_mode(scoring_mode)
        enable_semantic = settings.ENABLE_SEMANTIC if enable_semantic is None else enable_semantic
        explain         = settings.ENABLE_EXPLANATIONS if explain is None else explain

        log_info("Starting contract analysis",
                 characters      = len(text),
                 contract_type   = context.contract_type.value,
                 scoring_mode    = mode.value,
                 enable_semantic = enable_semantic,
                )

        validation = ContractValidator.get_validation_report(text)

        if not validation["looks_like_contract"]:
            log_warning("Input does not look like a contract", indicator_score = validation["indicator_score"])

        clauses = self.segmenter.segment(text)
        cache   = EmbeddingCache()

        try:
            channels = await self._run_channels(clauses, cache, enable_semantic)
            merged   = merge_results(channels["keyword"], channels["semantic"].matches)

            if (mode == ScoringMode.ENHANCED):
                deviations = DeviationChecker(include_restraint_of_trade = True).check(text, context)
                scoring    = self.scorer.overall(merged, context, deviations)
                score      = scoring.score
                level      = scoring.level
                summary    = scoring.explanation

                for violation in merged:
                    violation.weighted_score = self.scorer.violation_score(violation, context)

            else:
                deviations = DeviationChecker.check_clauses(clauses)
                score      = calculate_risk_score(merged)
                level      = get_risk_level(score)
                summary    = self.scorer.explain(RiskRules.get_risk_level(score), merged, context)

            if explain and merged:
                explanations = await self._get_explainer().explain_all(merged, language)

            else:
                explanations = [static_explanation(violation) for violation in merged]

            if explain and deviations:
                await self._get_explainer().summarize_deviations(deviations, text)

            for violation, explanation in zip(merged, explanations):
                violation.explanations = explanation

            positions     = {clause.id: clause.position for clause in clauses}
            risky_clauses = [self._clause_entry(index, violation, text, positions.get(violation.clause_id)) for index, violation in enumerate(merged)]

            performance   = {"totalMs"         : int((time.time() - start_time) * 1000),
                             "keywordMs"       : channels["keyword_ms"],
                             "semanticMs"      : channels["semantic_ms"],
                             "semanticEnabled" : enable_semantic,
                            }

            report        = AnalysisReport(overall_risk_score     = score,
                                           risk_level             = level,
                                           total_clauses          = len(clauses),
                                           risky_clauses          = risky_clauses,
                                           match_source_breakdown = match_source_breakdown(merged),
                                           breakdown              = self._level_counts(merged),
                                           deviations             = deviations,
                                           scoring_mode           = mode.value,
                                           score_explanation      = summary,
                                           performance            = performance,
                                           semantic_channel       = channels["semantic"].status(),
                                           context                = context,
                                           disclaimer             = DISCLAIMER,
                                          )

            log_info("Contract analysis complete",
                     score         = score,
                     risk_level    = level,
                     clauses       = len(clauses),
                     risky_clauses = len(merged),
                     deviations    = len(deviations),
                     total_ms      = performance["totalMs"],
                     cache         = cache.get_stats(),
                    )

            return report

        finally:
            cache.clear()


    def analyze_sync(self, text: str, **kwargs) -> AnalysisReport:
        """
        Blocking wrapper around `analyze` for callers without an event loop
        """
        return anyio.run(functools.partial(self.analyze, text, **kwargs))


    async def _run_channels(self, clauses: List[Clause], cache: EmbeddingCache, enable_semantic: bool) -> Dict[str, Any]:
        results = {"keyword"     : [],
                   "semantic"    : SemanticResult.disabled(),
                   "keyword_ms"  : 0,
                   "semantic_ms" : 0,
                  }

        async def _keyword():
            started               = time.time()
            results["keyword"]    = await anyio.to_thread.run_sync(self.keyword_validator.validate, clauses)
            results["keyword_ms"] = int((time.time() - started) * 1000)

        async def _semantic():
            started = time.time()

            try:
                results["semantic"] = await self._get_semantic_validator().validate(clauses, cache)

            except Exception as e:
                log_error(e, context = {"component" : "ContractAnalyzer", "operation" : "semantic_channel"})
                results["semantic"] = SemanticResult.failed(stage = "embedding", message = str(e))

            results["semantic_ms"] = int((time.time() - started) * 1000)

        async with anyio.create_task_group() as task_group:
            task_group.start_soon(_keyword)

            if enable_semantic:
                task_group.start_soon(_semantic)

        return results


    @staticmethod
    def _level_counts(violations: List[CombinedViolation]) -> Dict[str, int]:
        counts = {"CRITICAL" : 0, "HIGH" : 0, "MEDIUM" : 0, "LOW" : 0}

        for violation in violations:
            if violation.risk_level in counts:
                counts[violation.risk_level] += 1

        return counts


    @staticmethod
    def _clause_entry(index: int, violation: CombinedViolation, source: str, position: Optional[int]) -> Dict[str, Any]:
        start, end  = TextProcessor.find_clause_offsets(source, violation.clause_text, position)
        explanation = violation.explanations or static_explanation(violation)

        entry       = {"id"                 : index + 1,
                       "clauseNumber"       : violation.clause_id,
                       "originalText"       : violation.clause_text,
                       "violationType"      : violation.violation_type,
                       "riskLevel"          : violation.risk_level,
                       "riskScore"          : violation.risk_score,
                       "startIndex"         : start,
                       "endIndex"           : end,
                       "matchSource"        : violation.match_source,
                       "matchedKeywords"    : list(violation.matched_keywords),
                       "semanticSimilarity" : violation.semantic_similarity,
                       "indianLawReference" : {"section"  : violation.section_number,
                                               "title"    : violation.section_title,
                                               "fullText" : violation.section_full_text,
                                               "summary"  : violation.explanation,
                                               "url"      : violation.gov_url,
                                              },
                       "explanation"        : {**explanation.to_dict(), "generatedBy" : explanation.source},
                      }

        if violation.weighted_score is not None:
            entry["weightedScore"] = violation.weighted_score

        return entry
