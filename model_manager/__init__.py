# DEPENDENCIES
from .llm_manager import LLMManager
from .llm_manager import LLMProvider
from .llm_manager import LLMResponse
from .model_loader import ModelLoader
from .model_cache import EmbeddingCache
from .model_loader import EmbeddingModel


__all__ = ['LLMManager',
           'ModelLoader',
           'LLMProvider',
           'LLMResponse',
           'EmbeddingCache',
           'EmbeddingModel',
          ]
