# DEPENDENCIES
import pytest
import logging

from conftest import FailingEmbedder
from conftest import index_with_pattern
from services import contract_analyzer
from config.risk_rules import ScoringMode
from config.risk_rules import ContractType
from utils.logger import RiskEngineLogger
from services.data_models import SegmentationError
from model_manager.llm_manager import LLMResponse
from model_manager.model_cache import EmbeddingCache
from services.clause_explainer import ClauseExplainer
from services.contract_analyzer import ContractAnalyzer
from services.semantic_validator import SemanticValidator
from services.clause_explainer import ExplanationProvider
from services.clause_explainer import StaticExplanationProvider


class BrokenProvider(ExplanationProvider):
    name = "broken"

    def explain(self, clause_text, violation_type, statute_text, language = "en"):
        raise RuntimeError("model offline")


@pytest.fixture
def analyzer() -> ContractAnalyzer:
    return ContractAnalyzer()


@pytest.mark.anyio
async def test_sample_contract_report(analyzer, sample_contract):
    report = await analyzer.analyze(sample_contract, enable_semantic = False, scoring_mode = ScoringMode.ENHANCED, explain = False)
    result = report.to_dict()

    assert set(result) == {"analysis", "riskyClauses", "deviations", "performance", "semanticChannel", "disclaimer"}
    assert result["semanticChannel"]["status"] == "disabled"
    assert result["analysis"]["totalClauses"] == 4
    assert result["analysis"]["scoringMode"] == "enhanced"

    clause = result["riskyClauses"][0]

    assert clause["id"] == 1
    assert clause["clauseNumber"] == 2
    assert clause["violationType"] == "non_compete_section27"
    assert clause["matchSource"] == "keyword"
    assert clause["weightedScore"] == 50
    assert clause["indianLawReference"]["section"] == "Section 27"
    assert clause["explanation"]["generatedBy"] == "static"
    assert sample_contract[clause["startIndex"]:clause["endIndex"]] == clause["originalText"]

    categories = {deviation["category"]: deviation for deviation in result["deviations"]}

    assert categories["Payment Terms"]["deviationLevel"] == "EXTREME"
    assert categories["Jurisdiction"]["foundInContract"] == "Singapore jurisdiction"

    # 50 (non-compete) + 21 (payment) + 8 (jurisdiction)
    assert report.overall_risk_score == 79
    assert report.risk_level == "CRITICAL"
    assert report.score_explanation.startswith("This contract has 1 CRITICAL violation(s)")
    assert report.breakdown == {"CRITICAL" : 1, "HIGH" : 0, "MEDIUM" : 0, "LOW" : 0}


@pytest.mark.anyio
async def test_context_dict_is_accepted(analyzer, sample_contract):
    report = await analyzer.analyze(sample_contract, context = {"contractType" : "employment"}, enable_semantic = False, explain = False)

    assert report.context.contract_type == ContractType.EMPLOYMENT


@pytest.mark.anyio
async def test_blank_text_raises_segmentation_error(analyzer):
    with pytest.raises(SegmentationError):
        await analyzer.analyze("   \n\n   ", enable_semantic = False)


@pytest.mark.anyio
async def test_semantic_failure_keeps_keyword_results(sample_contract):
    semantic = SemanticValidator(embedder = FailingEmbedder(), index = index_with_pattern("s73_liability_02", 0.9))
    analyzer = ContractAnalyzer(semantic_validator = semantic)

    report   = await analyzer.analyze(sample_contract, enable_semantic = True, explain = False)

    assert report.semantic_channel["status"] == "failed"
    assert report.semantic_channel["error"]["stage"] == "embedding"
    assert [clause["clauseNumber"] for clause in report.risky_clauses] == [2]
    assert report.performance["semanticEnabled"] is True


@pytest.mark.anyio
async def test_request_cache_is_cleared(monkeypatch, analyzer, sample_contract):
    created = list()

    class SpyCache(EmbeddingCache):
        def __init__(self):
            super().__init__()
            self.cleared = False
            created.append(self)

        def clear(self):
            self.cleared = True
            super().clear()

    monkeypatch.setattr(contract_analyzer, "EmbeddingCache", SpyCache)

    await analyzer.analyze(sample_contract, enable_semantic = False, explain = False)

    assert len(created) == 1
    assert created[0].cleared


@pytest.mark.anyio
async def test_legacy_mode(analyzer, sample_contract):
    report = await analyzer.analyze(sample_contract, enable_semantic = False, scoring_mode = "legacy", explain = False)

    assert report.scoring_mode == "legacy"
    assert report.overall_risk_score == 45
    assert report.risk_level == "MODERATE RISK"
    assert "weightedScore" not in report.risky_clauses[0]
    assert "Non-Compete Clause" not in [deviation.category for deviation in report.deviations]
    assert report.score_explanation.startswith("This contract has some concerning clauses")


@pytest.mark.anyio
async def test_explanations_from_provider(sample_contract):
    analyzer = ContractAnalyzer(explainer = ClauseExplainer(provider = StaticExplanationProvider()))
    report   = await analyzer.analyze(sample_contract, enable_semantic = False, explain = True)
    entry    = report.risky_clauses[0]["explanation"]

    assert entry["generatedBy"] == "static"
    assert entry["freelancer"]["simple"].startswith("Non-compete clauses are generally void in India")

    for deviation in report.deviations:
        assert deviation.summary == deviation.explanation


@pytest.mark.anyio
async def test_provider_failure_falls_back_to_catalog_text(sample_contract):
    analyzer = ContractAnalyzer(explainer = ClauseExplainer(provider = BrokenProvider()))
    report   = await analyzer.analyze(sample_contract, enable_semantic = False, explain = True)
    entry    = report.risky_clauses[0]["explanation"]

    assert entry["generatedBy"] == "static"
    assert entry["freelancer"]["simple"].startswith("Non-compete clauses are void in India under Section 27.")


def test_analyze_sync(analyzer, sample_contract):
    report = analyzer.analyze_sync(sample_contract, enable_semantic = False, explain = False)

    assert report.total_clauses == 4
    assert report.disclaimer == contract_analyzer.DISCLAIMER


@pytest.mark.anyio
async def test_deviation_summaries_without_flagged_clauses():
    prompts   = list()

    class ShortAnswerLLM:
        def complete(self, prompt, **kwargs):
            prompts.append(prompt)

            return LLMResponse(text = "Disputes abroad are costly.", provider = "ollama", model = "stub", tokens_used = 0, latency_seconds = 0.0, success = True)

    explainer = ClauseExplainer(provider = StaticExplanationProvider(), llm_manager = ShortAnswerLLM())
    report    = await ContractAnalyzer(explainer = explainer).analyze("This Agreement shall be governed by the laws of Singapore.", enable_semantic = False, explain = True)

    assert report.risky_clauses == []
    assert [(deviation.category, deviation.summary) for deviation in report.deviations] == [("Jurisdiction", "Disputes abroad are costly.")]
    assert len(prompts) == 1


@pytest.mark.anyio
async def test_non_contract_input_is_analyzed_with_a_warning(monkeypatch, analyzer):
    warnings = list()

    def capture(level, message, **kwargs):
        if (level == logging.WARNING):
            warnings.append(message)

    monkeypatch.setattr(RiskEngineLogger, "log_structured", capture)

    report = await analyzer.analyze("Shopping list: eggs, milk and bread.", enable_semantic = False, explain = False)

    assert report.overall_risk_score == 0
    assert "Input does not look like a contract" in warnings
