# DEPENDENCIES
from .rule_store import RuleStore
from .data_models import Clause
from .data_models import Deviation
from .data_models import Violation
from .vector_index import VectorIndex
from .vector_index import build_index
from .data_models import SemanticMatch
from .data_models import ScoringResult
from .data_models import AnalysisReport
from .data_models import SemanticResult
from .data_models import ContractContext
from .result_merger import merge_results
from .data_models import SegmentationError
from .data_models import CombinedViolation
from .clause_explainer import ClauseExplainer
from .risk_scorer import ContextAwareScorer
from .clause_extractor import ClauseSegmenter
from .keyword_validator import KeywordValidator
from .deviation_checker import DeviationChecker
from .contract_analyzer import ContractAnalyzer
from .semantic_validator import SemanticValidator
from .clause_explainer import ExplanationProvider
from .false_positive_guard import FalsePositiveGuard
from .clause_explainer import StaticExplanationProvider
from .clause_explainer import OllamaExplanationProvider


__all__ = ['Clause',
           'RuleStore',
           'Deviation',
           'Violation',
           'VectorIndex',
           'build_index',
           'SemanticMatch',
           'ScoringResult',
           'merge_results',
           'AnalysisReport',
           'SemanticResult',
           'ClauseSegmenter',
           'ClauseExplainer',
           'ContractContext',
           'DeviationChecker',
           'KeywordValidator',
           'ContractAnalyzer',
           'SegmentationError',
           'CombinedViolation',
           'SemanticValidator',
           'ContextAwareScorer',
           'FalsePositiveGuard',
           'ExplanationProvider',
           'StaticExplanationProvider',
           'OllamaExplanationProvider',
          ]
