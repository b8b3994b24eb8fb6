# DEPENDENCIES
import re
import sys
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Iterator
from typing import Optional
from typing import Iterable

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_error
from utils.logger import log_warning
from config.settings import settings
from config.risk_rules import RiskLevel
from services.data_models import RegexRule
from services.data_models import KeywordRule
from services.data_models import RulePattern
from config.clause_patterns import ACT_SECTIONS
from config.clause_patterns import CLAUSE_PATTERNS
from config.clause_patterns import FALLBACK_PATTERNS


DEFAULT_SECTION_TITLE = "Indian Contract Act"


class RuleStore:
    """
    Read-only, ordered collection of RulePatterns

    Catalog entries are parsed once here: keywords lower-cased, regexes compiled, matcher chosen by
    pattern shape (RegexRule when a valid regex exists, KeywordRule otherwise)
    """
    _default : Optional["RuleStore"] = None

    def __init__(self, patterns: Optional[Iterable[RulePattern]] = None):
        self._patterns : List[RulePattern]      = list(patterns or [])
        self._by_id    : Dict[str, RulePattern] = {pattern.pattern_id: pattern for pattern in self._patterns}


    @classmethod
    def from_entries(cls, entries: Iterable[Dict[str, Any]]) -> "RuleStore":
        """
        Build a store from raw catalog entries

        Arguments:
        ----------
            entries { list } : Catalog dicts (see config/clause_patterns.py)

        Returns:
        --------
            { RuleStore }    : Store holding every valid entry in catalog order
        """
        patterns = list()

        for entry in entries:
            try:
                patterns.append(build_pattern(entry))

            except (KeyError, ValueError) as e:
                log_error(e, context = {"component"  : "RuleStore",
                                        "operation"  : "from_entries",
                                        "pattern_id" : entry.get("pattern_id"),
                                       })

        log_info("Rule store loaded", patterns = len(patterns))

        return cls(patterns)


    @classmethod
    def default(cls) -> "RuleStore":
        """
        Process-wide store built from the static catalog
        """
        if cls._default is None:
            cls._default = cls.from_entries(CLAUSE_PATTERNS)

        return cls._default


    @classmethod
    def fallback(cls) -> "RuleStore":
        return cls.from_entries(FALLBACK_PATTERNS)


    @property
    def patterns(self) -> List[RulePattern]:
        return list(self._patterns)


    def is_empty(self) -> bool:
        return not self._patterns


    def get(self, pattern_id: str) -> Optional[RulePattern]:
        return self._by_id.get(pattern_id)


    def __len__(self) -> int:
        return len(self._patterns)


    def __iter__(self) -> Iterator[RulePattern]:
        return iter(self._patterns)



def build_pattern(entry: Dict[str, Any]) -> RulePattern:
    """
    Parse one catalog entry into a RulePattern

    Raises ValueError when the score sign disagrees with the risk level
    """
    risk_level = RiskLevel(entry["risk_level"].upper())
    risk_score = int(entry["risk_score"])

    if (risk_level == RiskLevel.POSITIVE) and (risk_score > 0):
        raise ValueError(f"POSITIVE pattern {entry['pattern_id']} has positive score {risk_score}")

    if (risk_level != RiskLevel.POSITIVE) and (risk_score < 0):
        raise ValueError(f"{risk_level.value} pattern {entry['pattern_id']} has negative score {risk_score}")

    section       = entry.get("section") or entry.get("linked_section") or ""
    act_section   = ACT_SECTIONS.get(section, {})
    description   = entry.get("description", "")
    keywords      = tuple(keyword.lower() for keyword in entry.get("keywords", []))
    required_hits = 1 if (risk_level == RiskLevel.CRITICAL) else 2
    keyword_rule  = KeywordRule(keywords = keywords, required_hits = required_hits)
    regex         = entry.get("regex")

    return RulePattern(pattern_id        = entry["pattern_id"],
                       violation_type    = entry["violation_type"],
                       keywords          = keywords,
                       regex             = regex,
                       risk_level        = risk_level,
                       risk_score        = risk_score,
                       linked_section    = section,
                       section_title     = entry.get("section_title") or act_section.get("title") or DEFAULT_SECTION_TITLE,
                       section_full_text = entry.get("section_full_text") or act_section.get("full_text") or description,
                       description       = description,
                       explanation       = entry.get("explanation") or description,
                       matcher           = _build_matcher(entry["pattern_id"], regex, keyword_rule),
                       context_required  = _tag_set(entry.get("context_required", "all")),
                       industry_tags     = _tag_set(entry.get("industry_tags", "all")),
                       modifiers         = dict(entry.get("modifiers") or {}),
                       gov_url           = entry.get("gov_url") or settings.GOV_URL,
                      )


def _build_matcher(pattern_id: str, regex: Optional[str], keyword_rule: KeywordRule):
    if not regex:
        return keyword_rule

    try:
        compiled = re.compile(regex, re.IGNORECASE)

    except re.error as e:
        log_warning("Malformed regex, pattern falls back to keyword matching",
                    pattern_id = pattern_id,
                    regex      = regex,
                    error      = str(e),
                   )
        return keyword_rule

    return RegexRule(source = regex, compiled = compiled, fallback = keyword_rule)


def _tag_set(value):
    if (value is None) or (value == "all"):
        return "all"

    return frozenset(str(tag).lower() for tag in value)
