# DEPENDENCIES
import pytest

from conftest import FakeEmbedder
from services.rule_store import RuleStore
from services.vector_index import VectorIndex
from services.vector_index import build_index


def small_index() -> VectorIndex:
    index = VectorIndex()

    index.add(vectors  = [[1.0, 0.0], [0.6, 0.8], [0.0, 1.0]],
              ids      = ["a", "b", "c"],
              metadata = [{"clause_type" : "first"}, {"clause_type" : "second"}, {"clause_type" : "third"}],
             )

    return index


def test_query_orders_by_similarity():
    hits = small_index().query_nearest([1.0, 0.0], k = 3)

    assert [hit.id for hit in hits] == ["a", "b", "c"]
    assert hits[0].similarity == pytest.approx(1.0)
    assert hits[1].similarity == pytest.approx(0.6)
    assert hits[1].metadata == {"clause_type" : "second"}


def test_query_respects_k_and_min_similarity():
    index = small_index()

    assert [hit.id for hit in index.query_nearest([1.0, 0.0], k = 1)] == ["a"]
    assert [hit.id for hit in index.query_nearest([1.0, 0.0], k = 3, min_similarity = 0.5)] == ["a", "b"]


def test_vectors_are_normalized_on_insert():
    index = VectorIndex()
    index.add(vectors = [[10.0, 0.0]], ids = ["scaled"], metadata = [{}])

    assert index.query_nearest([3.0, 0.0])[0].similarity == pytest.approx(1.0)


def test_empty_index_returns_no_hits():
    index = VectorIndex()

    assert index.is_empty()
    assert index.query_nearest([1.0, 0.0]) == []


def test_dimension_mismatch_is_rejected():
    index = small_index()

    with pytest.raises(ValueError):
        index.add(vectors = [[1.0, 0.0, 0.0]], ids = ["d"], metadata = [{}])

    with pytest.raises(ValueError):
        index.query_nearest([1.0, 0.0, 0.0])

    with pytest.raises(ValueError):
        index.add(vectors = [[1.0, 0.0]], ids = ["d", "e"], metadata = [{}])


def test_persist_and_load(tmp_path):
    path   = tmp_path / "index" / "patterns.npy"
    small_index().persist(path)

    loaded = VectorIndex.load(path)

    assert len(loaded) == 3
    assert loaded.dimension == 2
    assert [hit.id for hit in loaded.query_nearest([0.0, 1.0], k = 2)] == ["c", "b"]


def test_load_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        VectorIndex.load(tmp_path / "missing.npy")

    path = tmp_path / "patterns.npy"
    small_index().persist(path)
    path.with_suffix(".meta.json").unlink()

    with pytest.raises(FileNotFoundError):
        VectorIndex.load(path)


def test_build_index_embeds_every_pattern():
    store    = RuleStore.default()
    embedder = FakeEmbedder()
    index    = build_index(store, embedder, top_keywords = 2)

    assert len(index) == len(store)
    assert len(embedder.calls) == len(store)
    assert index.query_nearest([1.0, 0.0], k = 1)[0].metadata["clause_type"]
