# DEPENDENCIES
import pytest

from conftest import FakeEmbedder
from conftest import FailingEmbedder
from conftest import index_with_pattern
from services.data_models import Clause
from services.vector_index import IndexHit
from services.vector_index import VectorIndex
from model_manager.model_cache import EmbeddingCache
from services.semantic_validator import round_similarity
from services.semantic_validator import SemanticValidator
from services.false_positive_guard import FalsePositiveGuard


FAIR_IP_CLAUSE = ("Upon full payment, all intellectual property rights in the Deliverables shall be assigned to the Client. "
                  "The Contractor retains the right to use the work in their portfolio.")

LIABILITY_CLAUSE = "The Contractor shall be liable without any cap for all indirect and consequential losses suffered by the Client."


@pytest.mark.anyio
async def test_fair_ip_clause_is_vetoed_by_guard(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = index_with_pattern("ip_blanket_01", 0.81), threshold = 0.75)
    result    = await validator.validate([Clause(id = 1, text = FAIR_IP_CLAUSE, position = 0)])

    assert result.ok
    assert result.matches == []


@pytest.mark.anyio
async def test_match_carries_pattern_metadata(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = index_with_pattern("s73_liability_02", 0.81), threshold = 0.75)
    result    = await validator.validate([Clause(id = 4, text = LIABILITY_CLAUSE, position = 0)])

    assert result.ok
    assert len(result.matches) == 1

    match = result.matches[0]

    assert match.clause_id == 4
    assert match.matched_pattern == "unlimited_liability_section73"
    assert match.similarity == 0.81
    assert match.section_number == "Section 73"
    assert match.match_source == "semantic"


@pytest.mark.anyio
async def test_below_threshold_and_short_clauses_are_skipped(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = index_with_pattern("s73_liability_02", 0.70), threshold = 0.75)
    result    = await validator.validate([Clause(id = 1, text = LIABILITY_CLAUSE, position = 0),
                                          Clause(id = 2, text = "Too short to embed.", position = 200),
                                         ])

    assert result.ok
    assert result.matches == []
    assert fake_embedder.calls == [LIABILITY_CLAUSE]


@pytest.mark.anyio
async def test_empty_index_reports_channel_error(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = VectorIndex())
    result    = await validator.validate([Clause(id = 1, text = LIABILITY_CLAUSE, position = 0)])

    assert not result.ok
    assert result.matches == []
    assert result.error.stage == "index"
    assert result.status()["status"] == "failed"


@pytest.mark.anyio
async def test_embedding_failure_on_every_clause_reports_channel_error():
    validator = SemanticValidator(embedder = FailingEmbedder(), index = index_with_pattern("s73_liability_02", 0.9))
    result    = await validator.validate([Clause(id = 1, text = LIABILITY_CLAUSE, position = 0)])

    assert not result.ok
    assert result.error.stage == "embedding"


@pytest.mark.anyio
async def test_single_clause_failure_does_not_stop_the_others():
    embedder  = FakeEmbedder(fail_on = "Broken")
    validator = SemanticValidator(embedder = embedder, index = index_with_pattern("s73_liability_02", 0.9))
    clauses   = [Clause(id = 1, text = "Broken clause text that is long enough to be embedded by the channel.", position = 0),
                 Clause(id = 2, text = LIABILITY_CLAUSE, position = 100),
                ]

    result    = await validator.validate(clauses)

    assert result.ok
    assert [match.clause_id for match in result.matches] == [2]


@pytest.mark.anyio
async def test_matches_follow_clause_order(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = index_with_pattern("s73_liability_02", 0.9), max_concurrency = 3)
    clauses   = [Clause(id = i, text = f"{LIABILITY_CLAUSE} Variant {i}.", position = i * 200) for i in range(1, 6)]

    result    = await validator.validate(clauses)

    assert [match.clause_id for match in result.matches] == [1, 2, 3, 4, 5]


@pytest.mark.anyio
async def test_request_cache_avoids_recomputing_embeddings(fake_embedder):
    validator = SemanticValidator(embedder = fake_embedder, index = index_with_pattern("s73_liability_02", 0.9))
    clauses   = [Clause(id = 1, text = LIABILITY_CLAUSE, position = 0)]
    cache     = EmbeddingCache()

    await validator.validate(clauses, cache)
    await validator.validate(clauses, cache)

    assert len(fake_embedder.calls) == 1
    assert cache.hits == 1

    cache.clear()

    assert len(cache) == 0


@pytest.mark.anyio
async def test_missing_embedder_reports_channel_error():
    validator = SemanticValidator(embedder = None, index = index_with_pattern("s73_liability_02", 0.9))
    result    = await validator.validate([Clause(id = 1, text = LIABILITY_CLAUSE, position = 0)])

    assert result.error.stage == "embedding"


def test_evaluate_hit_applies_threshold():
    validator = SemanticValidator(embedder = FakeEmbedder(), index = VectorIndex(), threshold = 0.75)
    clause    = Clause(id = 1, text = LIABILITY_CLAUSE, position = 0)
    hit       = IndexHit(id = "x", similarity = 0.74, metadata = {"clause_type" : "unlimited_liability_section73"})

    assert validator.evaluate_hit(clause, hit) is None


def test_round_similarity_rounds_half_up():
    assert round_similarity(0.8051) == 0.81
    assert round_similarity(0.8049) == 0.8
    assert round_similarity(0.999) == 1.0


def test_guard_families():
    guard = FalsePositiveGuard()

    assert guard.tables_for("blanket_ip_transfer") == ["deliverables", "fairIP"]
    assert guard.tables_for("unfair_payment_terms") == ["feeStatements"]
    assert guard.tables_for("vague_scope") == ["standardTerms"]
    assert guard.tables_for("non_compete_section27") == []

    assert guard.is_safe("The total fee of INR 50,000 is payable on delivery.", "unfair_payment_terms")
    assert guard.is_safe("Milestones are listed in the project timeline.", "vague_scope")
    assert not guard.is_safe(FAIR_IP_CLAUSE, "non_compete_section27")
