# DEPENDENCIES
import sys
from typing import Dict
from typing import List
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.risk_rules import MatchSource
from services.data_models import Violation
from services.data_models import SemanticMatch
from services.data_models import CombinedViolation


def merge_results(keyword_violations: List[Violation], semantic_matches: List[SemanticMatch]) -> List[CombinedViolation]:
    """
    Combine both channels into one entry per clause

    Keyword findings seed the list; a semantic match on a new clause is appended, a semantic match on a clause the keyword
    channel already flagged only marks it "both" and attaches the similarity. Result is stably sorted by risk score, highest first

    Arguments:
    ----------
        keyword_violations { list } : Violations from the keyword channel

        semantic_matches   { list } : Matches from the semantic channel

    Returns:
    --------
                           { list } : CombinedViolations, unique per clause id
    """
    combined  : List[CombinedViolation]      = list()
    by_clause : Dict[int, CombinedViolation] = dict()

    for violation in keyword_violations:
        if violation.clause_id in by_clause:
            continue

        entry                          = CombinedViolation.from_violation(violation)
        by_clause[violation.clause_id] = entry
        combined.append(entry)

    for match in semantic_matches:
        existing = by_clause.get(match.clause_id)

        if existing is None:
            entry                      = CombinedViolation.from_semantic(match)
            by_clause[match.clause_id] = entry
            combined.append(entry)

        else:
            existing.match_source        = MatchSource.BOTH.value
            existing.semantic_similarity = match.similarity

    # sorted() is stable, ties keep input order
    merged = sorted(combined, key = lambda violation: violation.risk_score, reverse = True)

    log_info("Detection channels merged",
             keyword  = len(keyword_violations),
             semantic = len(semantic_matches),
             combined = len(merged),
            )

    return merged


def match_source_breakdown(violations: List[CombinedViolation]) -> Dict[str, int]:
    """
    Count merged violations by provenance
    """
    breakdown = {source.value: 0 for source in MatchSource}

    for violation in violations:
        breakdown[violation.match_source] = breakdown.get(violation.match_source, 0) + 1

    return breakdown
