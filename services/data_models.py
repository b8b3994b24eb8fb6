# DEPENDENCIES
import re
import sys
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from typing import Union
from pathlib import Path
from typing import Mapping
from typing import Optional
from typing import FrozenSet
from dataclasses import field
from dataclasses import dataclass

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_warning
from config.settings import settings
from config.risk_rules import Industry
from config.risk_rules import RiskLevel
from config.risk_rules import MatchSource
from config.risk_rules import ContractType
from config.risk_rules import DeviationLevel


class SegmentationError(ValueError):
    """
    Raised when contract text cannot be segmented into clauses
    """
    pass


@dataclass(frozen = True)
class Clause:
    """
    Addressable unit of contract text: `source[position:position + len(text)] == text`
    """
    id       : int
    text     : str
    position : int

    @property
    def end(self) -> int:
        return self.position + len(self.text)


    def to_dict(self) -> Dict[str, Any]:
        return {"id"       : self.id,
                "text"     : self.text,
                "position" : self.position,
               }


@dataclass(frozen = True)
class KeywordRule:
    """
    Case-insensitive keyword containment: matches when at least `required_hits` keywords occur
    """
    keywords      : Tuple[str, ...]
    required_hits : int

    def match(self, text: str) -> Optional[List[str]]:
        lowered = text.lower()
        hits    = [keyword for keyword in self.keywords if keyword in lowered]

        if (len(hits) >= self.required_hits):
            return hits

        return None


@dataclass(frozen = True)
class RegexRule:
    """
    Regex tried first on the raw text; a miss falls through to keyword containment
    """
    source   : str
    compiled : re.Pattern
    fallback : KeywordRule

    def match(self, text: str) -> Optional[List[str]]:
        if self.compiled.search(text):
            return [f"regex:{self.source}"]

        return self.fallback.match(text)


Matcher = Union[RegexRule, KeywordRule]


@dataclass(frozen = True)
class RulePattern:
    """
    One known risky (or fair) clause type from the catalog
    """
    pattern_id        : str
    violation_type    : str
    keywords          : Tuple[str, ...]
    regex             : Optional[str]
    risk_level        : RiskLevel
    risk_score        : int
    linked_section    : str
    section_title     : str
    section_full_text : str
    description       : str
    explanation       : str
    matcher           : Matcher                       = field(compare = False, repr = False)
    context_required  : Union[FrozenSet[str], str]    = "all"
    industry_tags     : Union[FrozenSet[str], str]    = "all"
    modifiers         : Mapping[str, int]             = field(default_factory = dict)
    gov_url           : str                           = settings.GOV_URL

    @property
    def is_positive(self) -> bool:
        return self.risk_level == RiskLevel.POSITIVE


    def applies_to(self, contract_type: ContractType) -> bool:
        if (self.context_required == "all"):
            return True

        return contract_type.value in self.context_required


    def index_text(self, top_keywords: int = 5) -> str:
        """
        Text embedded for this pattern in the vector index: description plus its leading keywords
        """
        return " ".join([self.description] + list(self.keywords[:top_keywords]))


    def index_metadata(self) -> Dict[str, Any]:
        return {"pattern_id"        : self.pattern_id,
                "clause_type"       : self.violation_type,
                "risk_level"        : self.risk_level.value,
                "risk_score"        : self.risk_score,
                "section_number"    : self.linked_section,
                "section_title"     : self.section_title,
                "section_full_text" : self.section_full_text,
                "description"       : self.description,
               }


@dataclass
class Violation:
    """
    Clause flagged by one detection channel
    """
    clause_id         : int
    clause_text       : str
    violation_type    : str
    section_number    : str
    section_title     : str
    section_full_text : str
    risk_level        : str
    risk_score        : int
    explanation       : str
    matched_keywords  : List[str] = field(default_factory = list)
    gov_url           : str       = settings.GOV_URL
    pattern_id        : str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"clauseId"        : self.clause_id,
                "clauseText"      : self.clause_text,
                "violationType"   : self.violation_type,
                "sectionNumber"   : self.section_number,
                "sectionTitle"    : self.section_title,
                "sectionFullText" : self.section_full_text,
                "riskLevel"       : self.risk_level,
                "riskScore"       : self.risk_score,
                "matchedKeywords" : list(self.matched_keywords),
                "explanation"     : self.explanation,
                "govUrl"          : self.gov_url,
                "patternId"       : self.pattern_id,
               }


@dataclass
class SemanticMatch:
    """
    Best nearest-neighbour pattern for a clause from the vector index
    """
    clause_id         : int
    clause_text       : str
    matched_pattern   : str
    similarity        : float
    risk_level        : str
    risk_score        : int
    section_number    : str
    section_title     : str
    description       : str
    section_full_text : str = ""
    pattern_id        : str = ""
    match_source      : str = MatchSource.SEMANTIC.value

    def to_dict(self) -> Dict[str, Any]:
        return {"clauseId"       : self.clause_id,
                "clauseText"     : self.clause_text,
                "matchedPattern" : self.matched_pattern,
                "similarity"     : self.similarity,
                "riskLevel"      : self.risk_level,
                "riskScore"      : self.risk_score,
                "sectionNumber"  : self.section_number,
                "sectionTitle"   : self.section_title,
                "description"    : self.description,
                "matchSource"    : self.match_source,
               }


@dataclass
class RoleExplanation:
    simple           : str
    real_life_impact : str

    def to_dict(self) -> Dict[str, str]:
        return {"simple"         : self.simple,
                "realLifeImpact" : self.real_life_impact,
               }


@dataclass
class ClauseExplanation:
    """
    Plain-language reading of a violation from both sides of the contract
    """
    freelancer : RoleExplanation
    company    : RoleExplanation
    source     : str = "static"

    def to_dict(self) -> Dict[str, Any]:
        return {"freelancer" : self.freelancer.to_dict(),
                "company"    : self.company.to_dict(),
               }


@dataclass
class CombinedViolation(Violation):
    """
    Violation after merging both channels, tagged with its provenance
    """
    match_source        : str                         = MatchSource.KEYWORD.value
    semantic_similarity : Optional[float]             = None
    weighted_score      : Optional[int]               = None
    explanations        : Optional[ClauseExplanation] = None

    @classmethod
    def from_violation(cls, violation: Violation) -> "CombinedViolation":
        return cls(clause_id         = violation.clause_id,
                   clause_text       = violation.clause_text,
                   violation_type    = violation.violation_type,
                   section_number    = violation.section_number,
                   section_title     = violation.section_title,
                   section_full_text = violation.section_full_text,
                   risk_level        = violation.risk_level,
                   risk_score        = violation.risk_score,
                   explanation       = violation.explanation,
                   matched_keywords  = list(violation.matched_keywords),
                   gov_url           = violation.gov_url,
                   pattern_id        = violation.pattern_id,
                   match_source      = MatchSource.KEYWORD.value,
                  )


    @classmethod
    def from_semantic(cls, match: SemanticMatch) -> "CombinedViolation":
        return cls(clause_id           = match.clause_id,
                   clause_text         = match.clause_text,
                   violation_type      = match.matched_pattern,
                   section_number      = match.section_number,
                   section_title       = match.section_title,
                   section_full_text   = match.section_full_text or match.description,
                   risk_level          = match.risk_level,
                   risk_score          = match.risk_score,
                   explanation         = match.description,
                   matched_keywords    = [],
                   pattern_id          = match.pattern_id,
                   match_source        = MatchSource.SEMANTIC.value,
                   semantic_similarity = match.similarity,
                  )


    def to_dict(self) -> Dict[str, Any]:
        result                       = super().to_dict()
        result["matchSource"]        = self.match_source
        result["semanticSimilarity"] = self.semantic_similarity

        if self.weighted_score is not None:
            result["weightedScore"] = self.weighted_score

        return result


@dataclass
class Deviation:
    """
    Contract-wide term that falls outside a fair-practice baseline
    """
    category          : str
    found_in_contract : str
    fair_standard     : str
    deviation_level   : DeviationLevel
    explanation       : str
    legal_reference   : Optional[str] = None
    matched_text      : Optional[str] = None
    summary           : Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"category"        : self.category,
                  "foundInContract" : self.found_in_contract,
                  "fairStandard"    : self.fair_standard,
                  "deviationLevel"  : self.deviation_level.value,
                  "explanation"     : self.explanation,
                 }

        if self.legal_reference:
            result["legalReference"] = self.legal_reference

        if self.matched_text:
            result["matchedText"] = self.matched_text

        if self.summary:
            result["summary"] = self.summary

        return result


@dataclass(frozen = True)
class ContractContext:
    """
    Caller-supplied facts about the contract that drive weighting
    """
    contract_type   : ContractType    = ContractType.FREELANCE
    industry        : Industry        = Industry.GENERAL
    contract_value  : Optional[float] = None
    duration_months : Optional[float] = None
    user_experience : Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ContractContext":
        """
        Build a context from camelCase or snake_case keys

        Arguments:
        ----------
            data { dict } : Caller payload, may be None or partial

        Returns:
        --------
            { ContractContext } : Context with unknown contract types / industries replaced by the defaults
        """
        data          = data or {}

        raw_type      = data.get("contractType", data.get("contract_type", settings.DEFAULT_CONTRACT_TYPE))
        raw_industry  = data.get("industry", settings.DEFAULT_INDUSTRY)

        contract_type = cls._parse_enum(ContractType, raw_type, ContractType.FREELANCE)
        industry      = cls._parse_enum(Industry, raw_industry, Industry.GENERAL)

        return cls(contract_type   = contract_type,
                   industry        = industry,
                   contract_value  = cls._parse_number(data.get("contractValue", data.get("contract_value"))),
                   duration_months = cls._parse_number(data.get("durationMonths", data.get("duration_months"))),
                   user_experience = cls._parse_number(data.get("userExperience", data.get("user_experience"))),
                  )


    @staticmethod
    def _parse_enum(enum_class, value, default):
        if isinstance(value, enum_class):
            return value

        try:
            return enum_class(str(value).lower())

        except ValueError:
            log_warning(f"Unknown {enum_class.__name__} value, using default",
                        value   = value,
                        default = default.value,
                       )
            return default


    @staticmethod
    def _parse_number(value) -> Optional[float]:
        if value is None:
            return None

        try:
            return float(value)

        except (TypeError, ValueError):
            log_warning("Ignoring non-numeric context value", value = value)
            return None


    def to_dict(self) -> Dict[str, Any]:
        return {"contractType"   : self.contract_type.value,
                "industry"       : self.industry.value,
                "contractValue"  : self.contract_value,
                "durationMonths" : self.duration_months,
                "userExperience" : self.user_experience,
               }


@dataclass
class ScoringResult:
    score       : int
    level       : str
    breakdown   : Dict[str, int]
    explanation : str

    def to_dict(self) -> Dict[str, Any]:
        return {"score"       : self.score,
                "level"       : self.level,
                "breakdown"   : dict(self.breakdown),
                "explanation" : self.explanation,
               }


@dataclass
class ChannelError:
    """
    Why a best-effort channel produced no results
    """
    stage   : str
    message : str

    def to_dict(self) -> Dict[str, str]:
        return {"stage"   : self.stage,
                "message" : self.message,
               }


@dataclass
class SemanticResult:
    """
    Outcome of the semantic channel: either matches or a ChannelError, never both
    """
    matches : List[SemanticMatch]     = field(default_factory = list)
    error   : Optional[ChannelError]  = None

    @property
    def ok(self) -> bool:
        return self.error is None


    @classmethod
    def failed(cls, stage: str, message: str) -> "SemanticResult":
        return cls(matches = [], error = ChannelError(stage = stage, message = message))


    @classmethod
    def disabled(cls) -> "SemanticResult":
        return cls.failed(stage = "disabled", message = "Semantic channel disabled")


    def status(self) -> Dict[str, Any]:
        if self.ok:
            return {"status" : "ok", "matches" : len(self.matches)}

        status = "disabled" if (self.error.stage == "disabled") else "failed"

        return {"status" : status, "error" : self.error.to_dict()}


@dataclass
class AnalysisReport:
    """
    Complete analysis output
    """
    overall_risk_score     : int
    risk_level             : str
    total_clauses          : int
    risky_clauses          : List[Dict[str, Any]]
    match_source_breakdown : Dict[str, int]
    breakdown              : Dict[str, int]
    deviations             : List[Deviation]
    scoring_mode           : str
    score_explanation      : str
    performance            : Dict[str, Any]
    semantic_channel       : Dict[str, Any]
    context                : ContractContext
    disclaimer             : str

    def to_dict(self) -> Dict[str, Any]:
        return {"analysis"        : {"overallRiskScore"           : self.overall_risk_score,
                                     "riskLevel"                  : self.risk_level,
                                     "totalClauses"               : self.total_clauses,
                                     "riskyClausesFound"          : len(self.risky_clauses),
                                     "matchSourceBreakdown"       : dict(self.match_source_breakdown),
                                     "deviationsFromFairContract" : len(self.deviations),
                                     "breakdown"                  : dict(self.breakdown),
                                     "scoringMode"                : self.scoring_mode,
                                     "scoreExplanation"           : self.score_explanation,
                                     "context"                    : self.context.to_dict(),
                                    },
                "riskyClauses"    : self.risky_clauses,
                "deviations"      : [deviation.to_dict() for deviation in self.deviations],
                "performance"     : dict(self.performance),
                "semanticChannel" : dict(self.semantic_channel),
                "disclaimer"      : self.disclaimer,
               }
