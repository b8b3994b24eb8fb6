# DEPENDENCIES
import re
from typing import Dict
from typing import List
from typing import Optional


class FalsePositiveGuard:
    """
    Safe-phrasing heuristics that veto a match when the clause reads as standard, fair boilerplate
    """
    SAFE_CLAUSE_PATTERNS = {"deliverables"  : [r'shall deliver|will deliver|agrees to deliver',
                                               r'deliverables include|deliverables shall',
                                               r'complete.*source code.*documentation',
                                               r'provide.*documentation.*manual',
                                              ],
                            "feeStatements" : [r'total fee.*inr|fee of.*rupees',
                                               r'compensation.*shall be',
                                               r'milestone.*payment',
                                              ],
                            "fairIP"        : [r'upon (full )?payment.*transfer|transfer.*upon.*payment',
                                               r'ip.*in the (application|deliverable|work product)',
                                               r'contractor retains|developer retains',
                                               r'pre-existing.*materials',
                                              ],
                            "standardTerms" : [r'completion within.*days',
                                               r'project timeline',
                                               r'milestones? (are|shall)',
                                              ],
                           }

    # (violation-type substrings, safe tables consulted), first family hit decides
    FAMILIES             = [(("ip_transfer", "blanket_ip"), ("deliverables", "fairIP")),
                            (("payment", "unfair"),         ("feeStatements",)),
                            (("vague_scope",),              ("standardTerms",)),
                           ]

    def __init__(self):
        self._compiled : Dict[str, List[re.Pattern]] = {name: [re.compile(pattern, re.IGNORECASE) for pattern in patterns]
                                                        for name, patterns in self.SAFE_CLAUSE_PATTERNS.items()}


    def tables_for(self, violation_type: str) -> List[str]:
        """
        Safe-pattern tables registered for the family a violation type belongs to
        """
        for markers, tables in self.FAMILIES:
            if any(marker in violation_type for marker in markers):
                return list(tables)

        return []


    def reason(self, clause_text: str, violation_type: str) -> Optional[str]:
        """
        Name of the first safe pattern that matches, as "table:pattern", or None
        """
        for table in self.tables_for(violation_type):
            for compiled in self._compiled[table]:
                if compiled.search(clause_text):
                    return f"{table}:{compiled.pattern}"

        return None


    def is_safe(self, clause_text: str, violation_type: str) -> bool:
        return self.reason(clause_text, violation_type) is not None
