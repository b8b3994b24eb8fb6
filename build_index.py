"""
Builds the clause-pattern vector index read by the semantic channel
Run once per deployment, and again whenever the pattern catalog or the embedding model changes
"""

# DEPENDENCIES
import sys
import argparse
from pathlib import Path
from typing import Optional

from utils.logger import log_error
from config.settings import settings
from services.rule_store import RuleStore
from services.vector_index import VectorIndex
from services.vector_index import build_index


def build_and_persist(index_path: Optional[Path] = None, embedder = None, rule_store: Optional[RuleStore] = None) -> VectorIndex:
    """
    Embed every catalog pattern and write the index to disk

    Arguments:
    ----------
        index_path { Path }      : Destination `.npy` file, sidecar written next to it (default: VECTOR_INDEX_PATH)

        embedder                 : Object exposing `embed(text) -> List[float]` (default: the shared sentence-transformer)

        rule_store { RuleStore } : Patterns to index (default: built-in catalog)

    Returns:
    --------
             { VectorIndex }     : The persisted index
    """
    index_path = Path(index_path or settings.VECTOR_INDEX_PATH)
    rule_store = rule_store or RuleStore.default()

    if embedder is None:
        from model_manager.model_loader import ModelLoader

        embedder = ModelLoader().load_embedder()

    index = build_index(rule_store, embedder)
    index.persist(index_path)

    return index


def main(argv = None) -> int:
    parser = argparse.ArgumentParser(description = "Build the clause-pattern vector index")
    parser.add_argument("--output",
                        type    = Path,
                        default = settings.VECTOR_INDEX_PATH,
                        help    = "Index file to write (default: %(default)s)",
                       )

    args = parser.parse_args(argv)

    try:
        index = build_and_persist(index_path = args.output)

    except Exception as e:
        log_error(e, context = {"component" : "build_index", "operation" : "main", "output" : str(args.output)})
        print(f"✗ Failed to build vector index: {e}")
        return 1

    print(f"✓ Indexed {len(index)} patterns into {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
