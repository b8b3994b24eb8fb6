# DEPENDENCIES
from enum import Enum
from typing import Optional


class ContractType(Enum):
    FREELANCE  = "freelance"
    EMPLOYMENT = "employment"
    VENDOR     = "vendor"
    CONSULTANT = "consultant"
    GENERAL    = "general"


class Industry(Enum):
    SOFTWARE  = "software"
    DESIGN    = "design"
    WRITING   = "writing"
    VIDEO     = "video"
    MARKETING = "marketing"
    GENERAL   = "general"


class RiskLevel(Enum):
    CRITICAL = "CRITICAL"
    HIGH     = "HIGH"
    MEDIUM   = "MEDIUM"
    LOW      = "LOW"
    POSITIVE = "POSITIVE"


class DeviationLevel(Enum):
    MINOR       = "MINOR"
    SIGNIFICANT = "SIGNIFICANT"
    EXTREME     = "EXTREME"


class MatchSource(Enum):
    KEYWORD  = "keyword"
    SEMANTIC = "semantic"
    BOTH     = "both"


class ScoringMode(Enum):
    ENHANCED = "enhanced"
    LEGACY   = "legacy"


class RiskRules:
    """
    Scoring rules for Indian Contract Act clause violations
    """
    # Base severity per violation type; unknown types fall back to the pattern's stored score
    BASE_SCORES               = {"non_compete_section27"          : 45,
                                 "legal_waiver_section28"         : 50,
                                 "unlawful_object_section23"      : 50,
                                 "coercion_section15"             : 40,
                                 "undue_influence_section16"      : 40,
                                 "fraud_section17"                : 45,
                                 "excessive_penalty_section74"    : 28,
                                 "unlimited_liability_section73"  : 28,
                                 "blanket_ip_transfer"            : 30,
                                 "indirect_non_compete_portfolio" : 28,
                                 "unfair_payment_terms"           : 25,
                                 "delayed_payment"                : 18,
                                 "slight_payment_delay"           : 8,
                                 "unilateral_termination"         : 25,
                                 "unlimited_indemnity"            : 28,
                                 "scope_creep"                    : 15,
                                 "vague_scope"                    : 8,
                                 "foreign_jurisdiction"           : 15,
                                 "overbroad_confidentiality"      : 12,
                                 "long_confidentiality"           : 8,
                                 "fair_payment_advance"           : -8,
                                 "fair_payment_terms"             : -5,
                                 "fair_termination"               : -5,
                                 "fair_liability"                 : -5,
                                 "fair_jurisdiction"              : -3,
                                 "fair_ip"                        : -5,
                                }

    # Section-specific weights first, then violation-type category weights
    INDUSTRY_WEIGHTS          = {ContractType.FREELANCE  : {"Section 27"  : 1.5,
                                                            "Section 28"  : 1.3,
                                                            "Section 74"  : 1.3,
                                                            "Section 73"  : 1.2,
                                                            "payment"     : 1.4,
                                                            "ip"          : 1.2,
                                                            "termination" : 1.3,
                                                           },
                                 ContractType.EMPLOYMENT : {"Section 27"  : 0.7,
                                                            "Section 28"  : 1.2,
                                                            "Section 74"  : 1.0,
                                                            "Section 73"  : 1.0,
                                                            "payment"     : 0.8,
                                                            "ip"          : 0.9,
                                                            "termination" : 1.0,
                                                            "hours"       : 1.5,
                                                           },
                                 ContractType.VENDOR     : {"Section 27"  : 0.8,
                                                            "Section 74"  : 1.2,
                                                            "Section 73"  : 1.3,
                                                            "payment"     : 1.3,
                                                            "ip"          : 0.7,
                                                            "termination" : 1.0,
                                                           },
                                 ContractType.CONSULTANT : {"Section 27"  : 1.4,
                                                            "Section 28"  : 1.3,
                                                            "Section 74"  : 1.2,
                                                            "Section 73"  : 1.1,
                                                            "payment"     : 1.3,
                                                            "ip"          : 1.1,
                                                            "termination" : 1.2,
                                                           },
                                 ContractType.GENERAL    : {},
                                }

    TYPE_WEIGHT_CATEGORIES    = ["payment", "ip", "termination", "hours"]

    # (threshold, multiplier) pairs, highest threshold first
    CONTRACT_VALUE_TIERS      = [(1000000, 1.3),   # Rs 10L+
                                 (500000, 1.2),    # Rs 5L-10L
                                 (100000, 1.1),    # Rs 1L-5L
                                ]

    DURATION_TIERS            = [(12, 1.2),
                                 (6, 1.1),
                                ]

    PER_VIOLATION_CAP         = 50
    OVERALL_CAP               = 100

    # Overall score -> level; anything above zero below the last tier is LOW
    RISK_LEVEL_THRESHOLDS     = [(75, "CRITICAL"),
                                 (50, "HIGH"),
                                 (25, "MEDIUM"),
                                ]

    # Per-violation score -> breakdown bucket
    BREAKDOWN_BUCKETS         = [(40, "CRITICAL"),
                                 (20, "HIGH"),
                                 (10, "MEDIUM"),
                                ]

    LEGACY_LEVEL_THRESHOLDS   = [(76, "DANGEROUS"),
                                 (51, "HIGH RISK"),
                                 (26, "MODERATE RISK"),
                                ]

    # Enhanced scoring folds contract-wide deviations into the total
    DEVIATION_POINTS          = {DeviationLevel.EXTREME     : 15,
                                 DeviationLevel.SIGNIFICANT : 8,
                                 DeviationLevel.MINOR       : 3,
                                }

    DEVIATION_WEIGHT_KEYS     = {"Payment Terms"      : "payment",
                                 "Termination Notice" : "termination",
                                 "Working Hours"      : "hours",
                                 "Liability Cap"      : "Section 74",
                                 "Non-Compete Clause" : "Section 27",
                                }

    SCORE_EXPLANATIONS        = {"CRITICAL" : "This contract has {critical} CRITICAL violation(s) that may render parts void under Indian law. ",
                                 "HIGH"     : "This contract poses significant risks with {high} HIGH-risk clause(s). ",
                                 "MEDIUM"   : "This contract has some concerning clauses that should be negotiated. ",
                                 "LOW"      : "This contract has minor issues but is generally acceptable. ",
                                 "SAFE"     : "This contract appears fair and balanced. ",
                                }

    FREELANCE_CRITICAL_NOTE   = "As a freelancer, these issues are particularly concerning for your livelihood."


    @classmethod
    def get_base_score(cls, violation_type: str, fallback: int) -> int:
        """
        Base severity for a violation type, or the stored pattern score when the type is not tabulated
        """
        return cls.BASE_SCORES.get(violation_type, fallback)


    @classmethod
    def get_industry_weight(cls, section: Optional[str], weight_key: str, contract_type: ContractType) -> float:
        """
        Industry weight lookup

        Arguments:
        ----------
            section       { str }          : Linked statute section, e.g. "Section 27"

            weight_key    { str }          : Violation type (substring-matched against weight categories)

            contract_type { ContractType } : Contract type of the analysis

        Returns:
        --------
                       { float }           : Section weight, else category weight, else 1.0
        """
        weights = cls.INDUSTRY_WEIGHTS.get(contract_type, {})

        if section and weights.get(section):
            return weights[section]

        for category in cls.TYPE_WEIGHT_CATEGORIES:
            if (category in weight_key) and weights.get(category):
                return weights[category]

        return 1.0


    @classmethod
    def get_contract_value_multiplier(cls, contract_value: Optional[float]) -> float:
        if not contract_value:
            return 1.0

        for threshold, multiplier in cls.CONTRACT_VALUE_TIERS:
            if (contract_value >= threshold):
                return multiplier

        return 1.0


    @classmethod
    def get_duration_multiplier(cls, duration_months: Optional[float]) -> float:
        if not duration_months:
            return 1.0

        for threshold, multiplier in cls.DURATION_TIERS:
            if (duration_months >= threshold):
                return multiplier

        return 1.0


    @classmethod
    def get_risk_level(cls, score: int) -> str:
        for threshold, level in cls.RISK_LEVEL_THRESHOLDS:
            if (score >= threshold):
                return level

        return "LOW" if (score > 0) else "SAFE"


    @classmethod
    def get_breakdown_bucket(cls, score: int) -> str:
        if (score < 0):
            return "POSITIVE"

        for threshold, bucket in cls.BREAKDOWN_BUCKETS:
            if (score >= threshold):
                return bucket

        return "LOW"


    @classmethod
    def get_legacy_risk_level(cls, score: int) -> str:
        for threshold, level in cls.LEGACY_LEVEL_THRESHOLDS:
            if (score >= threshold):
                return level

        return "SAFE"
