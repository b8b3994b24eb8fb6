# DEPENDENCIES
from pathlib import Path


class ModelConfig:
    """
    Embedding and LLM settings
    """
    MODEL_DIR       = Path("models")

    # Embedding Model Settings (clause and pattern vectors)
    EMBEDDING_MODEL = {"model_name"     : "sentence-transformers/all-MiniLM-L6-v2",
                       "local_path"     : MODEL_DIR / "embeddings",
                       "dimension"      : 384,
                       "normalize"      : True,
                       "batch_size"     : 32,
                       "index_keywords" : 5,
                      }

    # LLM Generation Settings (explanation enrichment)
    LLM_GENERATION  = {"max_tokens"  : 1024,
                       "temperature" : 0.1,
                       "top_p"       : 0.9,
                      }
