# DEPENDENCIES
import sys
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_debug
from utils.logger import log_warning
from config.settings import settings
from services.data_models import Clause
from services.rule_store import RuleStore
from services.data_models import Violation
from services.data_models import RulePattern
from utils.logger import RiskEngineLogger
from services.false_positive_guard import FalsePositiveGuard


class KeywordValidator:
    """
    Match clauses against the rule catalog with regexes and keyword containment

    Patterns are tried in catalog order and the first match wins, so at most one violation is emitted per clause
    """
    def __init__(self, rule_store: Optional[RuleStore] = None, false_positive_guard: Optional[bool] = None):
        """
        Arguments:
        ----------
            rule_store           { RuleStore } : Catalog to match against (default: static catalog)

            false_positive_guard { bool }      : Veto matches on safe boilerplate (default: KEYWORD_FALSE_POSITIVE_GUARD)
        """
        self.rule_store = rule_store if rule_store is not None else RuleStore.default()
        use_guard       = settings.KEYWORD_FALSE_POSITIVE_GUARD if false_positive_guard is None else false_positive_guard
        self.guard      = FalsePositiveGuard() if use_guard else None
        self._fallback  = None


    def _active_patterns(self) -> List[RulePattern]:
        if not self.rule_store.is_empty():
            return self.rule_store.patterns

        if self._fallback is None:
            log_warning("Rule store is empty, using fallback patterns")
            self._fallback = RuleStore.fallback()

        return self._fallback.patterns


    @RiskEngineLogger.log_execution_time("keyword_validation")
    def validate(self, clauses: List[Clause]) -> List[Violation]:
        """
        Run every clause through the catalog

        Arguments:
        ----------
            clauses { list } : Clauses from the segmenter

        Returns:
        --------
                    { list } : One Violation per matching clause, in clause order
        """
        patterns   = self._active_patterns()
        violations = list()

        for clause in clauses:
            violation = self.validate_clause(clause, patterns)

            if violation:
                violations.append(violation)

        log_info("Keyword validation complete",
                 clauses    = len(clauses),
                 patterns   = len(patterns),
                 violations = len(violations),
                )

        return violations


    def validate_clause(self, clause: Clause, patterns: Optional[List[RulePattern]] = None) -> Optional[Violation]:
        for pattern in (patterns if patterns is not None else self._active_patterns()):
            matched = pattern.matcher.match(clause.text)

            if matched is None:
                continue

            if self.guard and self.guard.is_safe(clause.text, pattern.violation_type):
                log_debug("Keyword match vetoed as safe boilerplate",
                          clause_id  = clause.id,
                          pattern_id = pattern.pattern_id,
                         )
                return None

            return self._to_violation(clause, pattern, matched)

        return None


    @staticmethod
    def _to_violation(clause: Clause, pattern: RulePattern, matched: List[str]) -> Violation:
        return Violation(clause_id         = clause.id,
                         clause_text       = clause.text,
                         violation_type    = pattern.violation_type,
                         section_number    = pattern.linked_section,
                         section_title     = pattern.section_title,
                         section_full_text = pattern.section_full_text,
                         risk_level        = pattern.risk_level.value,
                         risk_score        = pattern.risk_score,
                         explanation       = pattern.explanation,
                         matched_keywords  = list(matched),
                         gov_url           = pattern.gov_url,
                         pattern_id        = pattern.pattern_id,
                        )
