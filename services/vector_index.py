# DEPENDENCIES
import sys
import json
import numpy as np
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.model_config import ModelConfig
from services.rule_store import RuleStore


@dataclass
class IndexHit:
    id         : str
    similarity : float
    metadata   : Dict[str, Any]


class VectorIndex:
    """
    In-memory cosine-similarity index over rule pattern embeddings

    Persisted as a `.npy` matrix with a `.meta.json` sidecar holding ids and pattern metadata
    """
    def __init__(self, dimension: Optional[int] = None):
        self.dimension                        = dimension
        self._vectors                         = np.zeros((0, dimension or 0), dtype = np.float32)
        self._ids      : List[str]            = list()
        self._metadata : List[Dict[str, Any]] = list()


    def add(self, vectors: List[List[float]], ids: List[str], metadata: List[Dict[str, Any]]):
        if not (len(vectors) == len(ids) == len(metadata)):
            raise ValueError("Vectors, ids and metadata must have the same length")

        if not vectors:
            return

        matrix = self._normalize(np.asarray(vectors, dtype = np.float32))

        if self.dimension is None:
            self.dimension = matrix.shape[1]
            self._vectors  = np.zeros((0, self.dimension), dtype = np.float32)

        if (matrix.shape[1] != self.dimension):
            raise ValueError(f"Expected {self.dimension}-dimensional vectors, got {matrix.shape[1]}")

        self._vectors = np.vstack([self._vectors, matrix])
        self._ids.extend(ids)
        self._metadata.extend(dict(item) for item in metadata)


    def is_empty(self) -> bool:
        return not self._ids


    def __len__(self) -> int:
        return len(self._ids)


    def query_nearest(self, vector: List[float], k: int = 3, min_similarity: float = 0.0) -> List[IndexHit]:
        """
        Nearest patterns by cosine similarity

        Arguments:
        ----------
            vector         { list }  : Query embedding

            k              { int }   : Maximum number of hits

            min_similarity { float } : Hits below this similarity are dropped

        Returns:
        --------
                           { list }  : IndexHits, most similar first; empty when the index is empty
        """
        if self.is_empty():
            return []

        query = np.asarray(vector, dtype = np.float32).reshape(-1)

        if (query.shape[0] != self.dimension):
            raise ValueError(f"Query has dimension {query.shape[0]}, index has {self.dimension}")

        norm  = np.linalg.norm(query)

        if (norm == 0):
            return []

        scores = self._vectors @ (query / norm)
        order  = np.argsort(-scores, kind = "stable")[:k]

        return [IndexHit(id         = self._ids[i],
                         similarity = float(scores[i]),
                         metadata   = dict(self._metadata[i]),
                        )
                for i in order if (scores[i] >= min_similarity)]


    @staticmethod
    def _normalize(matrix: np.ndarray) -> np.ndarray:
        norms             = np.linalg.norm(matrix, axis = 1, keepdims = True)
        norms[norms == 0] = 1.0

        return matrix / norms


    @staticmethod
    def _meta_path(index_path: Path) -> Path:
        return Path(index_path).with_suffix(".meta.json")


    def persist(self, index_path: Path):
        index_path = Path(index_path)
        index_path.parent.mkdir(parents = True, exist_ok = True)

        np.save(index_path, self._vectors)

        with open(self._meta_path(index_path), "w", encoding = "utf-8") as f:
            json.dump({"dimension" : self.dimension,
                       "ids"       : self._ids,
                       "metadata"  : self._metadata,
                      },
                      f,
                      indent       = 2,
                      ensure_ascii = False,
                     )

        log_info("Vector index persisted", path = str(index_path), vectors = len(self))


    @classmethod
    def load(cls, index_path: Path) -> "VectorIndex":
        """
        Load a persisted index; raises FileNotFoundError when either file is missing
        """
        index_path = Path(index_path)
        meta_path  = cls._meta_path(index_path)

        if not index_path.exists():
            raise FileNotFoundError(f"Vector index not found: {index_path}")

        if not meta_path.exists():
            raise FileNotFoundError(f"Vector index metadata not found: {meta_path}")

        with open(meta_path, "r", encoding = "utf-8") as f:
            raw = json.load(f)

        index           = cls(dimension = raw.get("dimension"))
        index._vectors  = np.load(index_path).astype(np.float32)
        index._ids      = list(raw["ids"])
        index._metadata = list(raw["metadata"])

        if (len(index._ids) != index._vectors.shape[0]):
            raise ValueError(f"Vector index {index_path} has {index._vectors.shape[0]} vectors but {len(index._ids)} ids")

        return index



def build_index(rule_store: RuleStore, embedder, top_keywords: Optional[int] = None) -> VectorIndex:
    """
    Embed every pattern of the store (description plus leading keywords) into a fresh index

    Arguments:
    ----------
        rule_store   { RuleStore } : Patterns to index

        embedder                   : Object exposing `embed(text) -> List[float]`

        top_keywords { int }       : Keywords appended to each description (default: model config)

    Returns:
    --------
        { VectorIndex }            : Index with one vector per pattern, id = pattern_id
    """
    top_keywords = top_keywords or ModelConfig.EMBEDDING_MODEL["index_keywords"]
    patterns     = rule_store.patterns
    index        = VectorIndex()

    index.add(vectors  = [embedder.embed(pattern.index_text(top_keywords)) for pattern in patterns],
              ids      = [pattern.pattern_id for pattern in patterns],
              metadata = [pattern.index_metadata() for pattern in patterns],
             )

    log_info("Vector index built", patterns = len(patterns), dimension = index.dimension)

    return index
