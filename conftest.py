# DEPENDENCIES
import math
import pytest
from typing import List
from typing import Optional

from services.rule_store import RuleStore
from services.vector_index import VectorIndex


SAMPLE_CONTRACT = """FREELANCE SERVICES AGREEMENT

1. Services
The Contractor shall deliver a mobile application as described in Schedule A.

2. Non-Compete
The Contractor agrees not to compete with the Client for 2 years after termination.

3. Payment
Payment shall be made within 120 days of invoice.

4. Governing Law
This Agreement shall be governed by the laws of Singapore."""


class FakeEmbedder:
    """
    Returns one fixed vector for every text and records what was embedded
    """
    def __init__(self, vector: Optional[List[float]] = None, fail_on: Optional[str] = None):
        self.vector  = vector or [1.0, 0.0]
        self.fail_on = fail_on
        self.calls   = list()

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)

        if (self.fail_on is not None) and (self.fail_on in text):
            raise RuntimeError("embedding backend unavailable")

        return list(self.vector)


class FailingEmbedder:
    def embed(self, text: str) -> List[float]:
        raise RuntimeError("embedding backend unavailable")


def index_with_pattern(pattern_id: str, similarity: float) -> VectorIndex:
    """
    Two-dimensional index holding one catalog pattern at the given cosine similarity from [1, 0]
    """
    pattern = RuleStore.default().get(pattern_id)
    index   = VectorIndex(dimension = 2)

    index.add(vectors  = [[similarity, math.sqrt(1.0 - similarity ** 2)]],
              ids      = [pattern.pattern_id],
              metadata = [pattern.index_metadata()],
             )

    return index


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_contract() -> str:
    return SAMPLE_CONTRACT


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()
