# DEPENDENCIES
import sys
import torch
import threading
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional
from sentence_transformers import SentenceTransformer

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_error
from config.model_config import ModelConfig


class EmbeddingModel:
    """
    `embed(text) -> List[float]` over a loaded sentence-transformer, used for clauses and for indexing patterns
    """
    def __init__(self, model: SentenceTransformer, normalize: bool = True):
        self.model     = model
        self.normalize = normalize


    def embed(self, text: str) -> List[float]:
        vector = self.model.encode(text, normalize_embeddings = self.normalize, show_progress_bar = False)

        return vector.tolist()


class ModelLoader:
    """
    Loads the sentence-transformer once per process and shares it between analyses

    The model is read from `ModelConfig.EMBEDDING_MODEL["local_path"]` when a copy exists there, otherwise it is
    downloaded and saved to that path
    """
    _embedder : Optional[EmbeddingModel] = None
    _error    : Optional[str]            = None
    _lock                                = threading.Lock()

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or ModelConfig.EMBEDDING_MODEL
        self.device = "cuda" if torch.cuda.is_available() else "cpu"


    @classmethod
    def is_loaded(cls) -> bool:
        return cls._embedder is not None


    def load_embedder(self) -> EmbeddingModel:
        """
        Shared embedding model, loading it on first use

        Returns:
        --------
            { EmbeddingModel } : Process-wide embedder

        Raises:
        -------
            Exception          : Whatever sentence-transformers raised while loading; the message is kept for `status`
        """
        with ModelLoader._lock:
            if ModelLoader._embedder is None:
                ModelLoader._embedder = EmbeddingModel(model     = self._load_sentence_model(),
                                                       normalize = self.config["normalize"],
                                                      )
                ModelLoader._error    = None

            return ModelLoader._embedder


    def _load_sentence_model(self) -> SentenceTransformer:
        local_path = Path(self.config["local_path"])
        model_name = self.config["model_name"]

        try:
            if local_path.exists() and any(local_path.iterdir()):
                log_info("Loading embedding model from local copy", path = str(local_path), device = self.device)
                model = SentenceTransformer(model_name_or_path = str(local_path), device = self.device)

            else:
                log_info("Downloading embedding model", model_name = model_name, device = self.device)
                model = SentenceTransformer(model_name_or_path = model_name, device = self.device)

                local_path.mkdir(parents = True, exist_ok = True)
                model.save(str(local_path))

        except Exception as e:
            log_error(e, context = {"component" : "ModelLoader", "operation" : "load_embedder", "model_name" : model_name})
            ModelLoader._error = str(e)
            raise

        log_info("Embedding model loaded", model_name = model_name, dimension = self.config["dimension"])

        return model


    @classmethod
    def status(cls) -> Dict[str, Any]:
        return {"loaded" : cls.is_loaded(),
                "error"  : cls._error,
               }


    @classmethod
    def unload(cls):
        """
        Drop the shared model so it can be garbage collected
        """
        with cls._lock:
            cls._embedder = None

        log_info("Embedding model unloaded")
