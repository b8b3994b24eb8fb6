# DEPENDENCIES
from .logger import RiskEngineLogger
from .text_processor import TextProcessor
from .validators import ContractValidator


__all__ = ['TextProcessor',
           'RiskEngineLogger',
           'ContractValidator',
          ]
