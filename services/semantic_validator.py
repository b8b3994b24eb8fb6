# DEPENDENCIES
import sys
import math
import anyio
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_debug
from utils.logger import log_error
from utils.logger import log_warning
from config.settings import settings
from services.data_models import Clause
from utils.logger import RiskEngineLogger
from services.vector_index import IndexHit
from services.vector_index import VectorIndex
from services.data_models import SemanticMatch
from services.data_models import SemanticResult
from model_manager.model_cache import EmbeddingCache
from services.false_positive_guard import FalsePositiveGuard


def round_similarity(similarity: float) -> float:
    """
    Two decimals, halves rounded up
    """
    return math.floor(similarity * 100 + 0.5) / 100


class SemanticValidator:
    """
    Best-effort detection channel: embeds clauses and looks up the nearest catalog pattern

    Never raises past `validate`; failures come back as a SemanticResult carrying a ChannelError
    """
    def __init__(self, embedder = None, index: Optional[VectorIndex] = None, guard: Optional[FalsePositiveGuard] = None,
                 threshold: Optional[float] = None, top_k: Optional[int] = None, min_length: Optional[int] = None,
                 max_concurrency: Optional[int] = None, clause_timeout: Optional[float] = None):
        """
        Arguments:
        ----------
            embedder        : Object exposing `embed(text) -> List[float]`

            index           { VectorIndex }        : Pattern index queried per clause

            guard           { FalsePositiveGuard } : Safe-phrasing veto (default: new guard)

            threshold       { float }              : Minimum cosine similarity (default: SIMILARITY_THRESHOLD)

            top_k           { int }                : Neighbours requested per clause (default: SEMANTIC_TOP_K)

            min_length      { int }                : Shorter clauses are skipped (default: MIN_SEMANTIC_CLAUSE_LENGTH)

            max_concurrency { int }                : Clauses processed at once (default: SEMANTIC_MAX_CONCURRENCY)

            clause_timeout  { float }              : Seconds per clause, 0 disables (default: SEMANTIC_CLAUSE_TIMEOUT)
        """
        self.embedder        = embedder
        self.index           = index
        self.guard           = guard or FalsePositiveGuard()
        self.threshold       = settings.SIMILARITY_THRESHOLD if threshold is None else threshold
        self.top_k           = top_k or settings.SEMANTIC_TOP_K
        self.min_length      = settings.MIN_SEMANTIC_CLAUSE_LENGTH if min_length is None else min_length
        self.max_concurrency = max(1, max_concurrency or settings.SEMANTIC_MAX_CONCURRENCY)
        self.clause_timeout  = settings.SEMANTIC_CLAUSE_TIMEOUT if clause_timeout is None else clause_timeout


    @classmethod
    def from_settings(cls) -> "SemanticValidator":
        """
        Validator over the persisted index and the configured embedding model

        A missing index or a model that fails to load leaves the validator unusable, which `validate` reports
        """
        index    = None
        embedder = None

        try:
            index = VectorIndex.load(settings.VECTOR_INDEX_PATH)

        except (FileNotFoundError, ValueError) as e:
            log_warning("Vector index unavailable, semantic channel disabled", path = str(settings.VECTOR_INDEX_PATH), error = str(e))

        if index is not None:
            # Imported here so the keyword-only path never loads torch
            from model_manager.model_loader import ModelLoader

            try:
                embedder = ModelLoader().load_embedder()

            except Exception as e:
                log_error(e, context = {"component" : "SemanticValidator", "operation" : "from_settings"})

        return cls(embedder = embedder, index = index)


    @RiskEngineLogger.log_execution_time("semantic_validation")
    async def validate(self, clauses: List[Clause], cache: Optional[EmbeddingCache] = None) -> SemanticResult:
        """
        Find the best pattern match for each eligible clause

        Arguments:
        ----------
            clauses { list }           : Clauses from the segmenter

            cache   { EmbeddingCache } : Request-scoped embedding cache (a private one is used when omitted)

        Returns:
        --------
            { SemanticResult }         : Matches in clause order, or a ChannelError
        """
        if (self.index is None) or self.index.is_empty():
            return SemanticResult.failed(stage = "index", message = "Vector index is unavailable or empty")

        if self.embedder is None:
            return SemanticResult.failed(stage = "embedding", message = "Embedding model is unavailable")

        cache    = cache if cache is not None else EmbeddingCache()
        eligible = [clause for clause in clauses if (len(clause.text) >= self.min_length)]
        limiter  = anyio.CapacityLimiter(self.max_concurrency)
        found    : Dict[int, Optional[SemanticMatch]] = dict()
        failures : List[str]                          = list()

        async with anyio.create_task_group() as task_group:
            for clause in eligible:
                task_group.start_soon(self._run_clause, clause, cache, limiter, found, failures)

        if eligible and (len(failures) == len(eligible)):
            return SemanticResult.failed(stage = "embedding", message = failures[0])

        matches = [found[clause.id] for clause in eligible if found.get(clause.id)]

        log_info("Semantic validation complete",
                 clauses  = len(clauses),
                 eligible = len(eligible),
                 matches  = len(matches),
                 failures = len(failures),
                )

        return SemanticResult(matches = matches)


    async def _run_clause(self, clause: Clause, cache: EmbeddingCache, limiter: anyio.CapacityLimiter, found: Dict[int, Optional[SemanticMatch]],
                          failures: List[str]):
        try:
            if (self.clause_timeout and self.clause_timeout > 0):
                with anyio.fail_after(self.clause_timeout):
                    found[clause.id] = await self._match_clause(clause, cache, limiter)

            else:
                found[clause.id] = await self._match_clause(clause, cache, limiter)

        except TimeoutError:
            log_warning("Semantic lookup timed out, clause skipped", clause_id = clause.id, timeout = self.clause_timeout)
            failures.append(f"Clause {clause.id} timed out after {self.clause_timeout}s")

        except Exception as e:
            log_error(e, context = {"component" : "SemanticValidator", "operation" : "match_clause", "clause_id" : clause.id})
            failures.append(f"Clause {clause.id}: {e}")


    async def _match_clause(self, clause: Clause, cache: EmbeddingCache, limiter: anyio.CapacityLimiter) -> Optional[SemanticMatch]:
        vector = cache.get(clause.text)

        if vector is None:
            vector = await anyio.to_thread.run_sync(self.embedder.embed, clause.text, limiter = limiter)
            vector = cache.set_if_absent(clause.text, vector)

        hits   = await anyio.to_thread.run_sync(self.index.query_nearest, vector, self.top_k, self.threshold, limiter = limiter)

        if not hits:
            return None

        return self.evaluate_hit(clause, hits[0])


    def evaluate_hit(self, clause: Clause, hit: IndexHit) -> Optional[SemanticMatch]:
        """
        Turn the best index hit into a SemanticMatch unless it is below threshold or vetoed as safe boilerplate
        """
        if (hit.similarity < self.threshold):
            return None

        metadata       = hit.metadata
        violation_type = metadata.get("clause_type", "")
        veto           = self.guard.reason(clause.text, violation_type)

        if veto:
            log_debug("Semantic match vetoed as safe boilerplate",
                      clause_id      = clause.id,
                      violation_type = violation_type,
                      reason         = veto,
                     )
            return None

        return SemanticMatch(clause_id         = clause.id,
                             clause_text       = clause.text,
                             matched_pattern   = violation_type,
                             similarity        = round_similarity(hit.similarity),
                             risk_level        = metadata.get("risk_level", "MEDIUM"),
                             risk_score        = int(metadata.get("risk_score", 0)),
                             section_number    = metadata.get("section_number", ""),
                             section_title     = metadata.get("section_title", ""),
                             description       = metadata.get("description", ""),
                             section_full_text = metadata.get("section_full_text", ""),
                             pattern_id        = metadata.get("pattern_id", hit.id),
                            )
