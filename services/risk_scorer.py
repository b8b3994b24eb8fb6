# DEPENDENCIES
import re
import sys
import math
from typing import Dict
from typing import List
from typing import Union
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from config.risk_rules import RiskLevel
from config.risk_rules import RiskRules
from config.risk_rules import ScoringMode
from config.risk_rules import ContractType
from utils.logger import RiskEngineLogger
from services.data_models import Violation
from services.data_models import Deviation
from services.data_models import ScoringResult
from services.data_models import ContractContext


def round_half_up(value: float) -> int:
    """
    Nearest integer, halves away from zero: 37.5 -> 38, -2.5 -> -3
    """
    if (value < 0):
        return -math.floor(-value + 0.5)

    return math.floor(value + 0.5)


def resolve_scoring_mode(mode: Union[ScoringMode, str, None] = None) -> ScoringMode:
    """
    Scoring mode from an explicit value or the SCORING_MODE setting
    """
    if isinstance(mode, ScoringMode):
        return mode

    return ScoringMode(str(mode or settings.SCORING_MODE).lower())


class ContextAwareScorer:
    """
    Weighted risk scoring: base severity, clause-text modifiers and contract-context multipliers
    """
    def __init__(self):
        self.rules = RiskRules


    def violation_score(self, violation: Violation, context: Optional[ContractContext] = None) -> int:
        """
        Weighted score for a single violation

        Arguments:
        ----------
            violation { Violation }       : Keyword, semantic or merged violation

            context   { ContractContext } : Contract facts driving the multipliers (default: freelance/general)

        Returns:
        --------
                      { int }             : Weighted score in [0, 50]; POSITIVE patterns floor at 0
        """
        context = context or ContractContext()
        score   = self.rules.get_base_score(violation.violation_type, violation.risk_score)
        score   = max(self._apply_text_modifiers(score, violation), 0)

        score  *= self.rules.get_industry_weight(violation.section_number, violation.violation_type, context.contract_type)
        score  *= self.rules.get_contract_value_multiplier(context.contract_value)
        score  *= self.rules.get_duration_multiplier(context.duration_months)

        return min(max(round_half_up(score), 0), self.rules.PER_VIOLATION_CAP)


    def _apply_text_modifiers(self, score: float, violation: Violation) -> float:
        text           = violation.clause_text.lower()
        violation_type = violation.violation_type

        if (violation.section_number == "Section 27"):
            if ("goodwill" in text) and ("sale" in text):
                score -= 20

            if any(phrase in text for phrase in ("not work", "not engage", "not provide")):
                score += 5

        if ("penalty" in violation_type):
            multiple = re.search(r'(\d+)x', text)

            if multiple:
                factor = int(multiple.group(1))

                if (factor >= 5):
                    score += 15

                elif (factor >= 3):
                    score += 8

            if any(phrase in text for phrase in ("per day", "per hour", "daily")):
                score += 8

        if ("payment" in violation_type):
            days = re.search(r'(\d+)\s*days', text)

            if days:
                count = int(days.group(1))

                if (count >= 120):
                    score += 10

                elif (count >= 90):
                    score += 5

            if any(phrase in text for phrase in ("advance", "upfront", "milestone")):
                score -= 5

        if ("liability" in violation_type):
            if ("unlimited" in text) or ("no limit" in text):
                score += 5

            if ("capped" in text) or ("limited to" in text):
                score -= 5

        return score


    def deviation_score(self, deviation: Deviation, context: Optional[ContractContext] = None) -> int:
        """
        Points a contract-wide deviation adds in enhanced scoring
        """
        context    = context or ContractContext()
        points     = self.rules.DEVIATION_POINTS[deviation.deviation_level]
        weight_key = self.rules.DEVIATION_WEIGHT_KEYS.get(deviation.category, "")
        section    = weight_key if weight_key.startswith("Section") else None
        weight     = self.rules.get_industry_weight(section, weight_key, context.contract_type)

        return round_half_up(points * weight)


    @RiskEngineLogger.log_execution_time("calculate_overall_score")
    def overall(self, violations: List[Violation], context: Optional[ContractContext] = None, deviations: Optional[List[Deviation]] = None) -> ScoringResult:
        """
        Aggregate score for a contract

        Arguments:
        ----------
            violations { list }            : Merged violations

            context    { ContractContext } : Contract facts

            deviations { list }            : When given, deviation points are added to the total

        Returns:
        --------
                       { ScoringResult }   : Score clamped to [0, 100], level, points per bucket and a summary sentence
        """
        context   = context or ContractContext()
        breakdown = {"CRITICAL" : 0, "HIGH" : 0, "MEDIUM" : 0, "LOW" : 0, "POSITIVE" : 0}
        total     = 0

        for violation in violations:
            score  = self.violation_score(violation, context)
            total += score

            breakdown[self.rules.get_breakdown_bucket(score)] += score

        for deviation in (deviations or []):
            points  = self.deviation_score(deviation, context)
            total  += points

            breakdown[self.rules.get_breakdown_bucket(points)] += points

        total       = min(max(total, 0), self.rules.OVERALL_CAP)
        level       = self.rules.get_risk_level(total)
        explanation = self.explain(level, violations, context)

        log_info("Risk score calculated",
                 score         = total,
                 risk_level    = level,
                 violations    = len(violations),
                 deviations    = len(deviations or []),
                 contract_type = context.contract_type.value,
                )

        return ScoringResult(score       = total,
                             level       = level,
                             breakdown   = breakdown,
                             explanation = explanation,
                            )


    def explain(self, level: str, violations: List[Violation], context: ContractContext) -> str:
        critical    = sum(1 for violation in violations if violation.risk_level == RiskLevel.CRITICAL.value)
        high        = sum(1 for violation in violations if violation.risk_level == RiskLevel.HIGH.value)
        explanation = self.rules.SCORE_EXPLANATIONS[level].format(critical = critical, high = high)

        if (context.contract_type == ContractType.FREELANCE) and (critical > 0):
            explanation += self.rules.FREELANCE_CRITICAL_NOTE

        return explanation


    def weighted_scores(self, violations: List[Violation], context: Optional[ContractContext] = None) -> Dict[int, int]:
        """
        Per-clause weighted score, keyed by clause id
        """
        return {violation.clause_id: self.violation_score(violation, context) for violation in violations}


def calculate_risk_score(violations: List[Violation]) -> int:
    """
    Legacy score: stored pattern scores summed, kept within [0, 100]
    """
    total = sum(violation.risk_score for violation in violations)

    return min(max(total, 0), RiskRules.OVERALL_CAP)


def get_risk_level(score: int) -> str:
    """
    Legacy level labels: DANGEROUS, HIGH RISK, MODERATE RISK, SAFE
    """
    return RiskRules.get_legacy_risk_level(score)
