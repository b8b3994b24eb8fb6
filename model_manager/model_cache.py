# DEPENDENCIES
import sys
import hashlib
import threading
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_debug


def hash_text(text: str) -> str:
    """
    Cache key for a piece of text
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest()


class EmbeddingCache:
    """
    Request-scoped clause embedding cache: text hash -> vector

    Created by the caller for one analysis and cleared when it ends; entries are written at most once
    """
    def __init__(self):
        self._vectors : Dict[str, List[float]] = dict()
        self._lock                             = threading.Lock()
        self.hits                              = 0
        self.misses                            = 0


    def get(self, text: str) -> Optional[List[float]]:
        key = hash_text(text)

        with self._lock:
            vector = self._vectors.get(key)

            if vector is None:
                self.misses += 1

            else:
                self.hits   += 1

            return vector


    def set_if_absent(self, text: str, vector: List[float]) -> List[float]:
        """
        Store a vector unless one is already cached for the text; returns the cached vector
        """
        key = hash_text(text)

        with self._lock:
            return self._vectors.setdefault(key, vector)


    def clear(self):
        with self._lock:
            size = len(self._vectors)
            self._vectors.clear()

        log_debug("Embedding cache cleared", entries = size, hits = self.hits, misses = self.misses)


    def __len__(self) -> int:
        with self._lock:
            return len(self._vectors)


    def get_stats(self) -> dict:
        return {"entries" : len(self),
                "hits"    : self.hits,
                "misses"  : self.misses,
               }
