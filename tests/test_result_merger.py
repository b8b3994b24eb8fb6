# DEPENDENCIES
from services.data_models import Violation
from services.data_models import SemanticMatch
from services.data_models import CombinedViolation
from services.result_merger import merge_results
from services.result_merger import match_source_breakdown


def keyword_violation(clause_id, risk_score, risk_level = "HIGH", violation_type = "unfair_payment_terms"):
    return Violation(clause_id         = clause_id,
                     clause_text       = f"Clause {clause_id} text",
                     violation_type    = violation_type,
                     section_number    = "Section 73",
                     section_title     = "Compensation for loss or damage caused by breach of contract",
                     section_full_text = "When a contract has been broken...",
                     risk_level        = risk_level,
                     risk_score        = risk_score,
                     explanation       = "Keyword explanation",
                     matched_keywords  = ["net 90", "ninety days"],
                    )


def semantic_match(clause_id, risk_score, similarity = 0.83):
    return SemanticMatch(clause_id       = clause_id,
                         clause_text     = f"Clause {clause_id} text",
                         matched_pattern = "non_compete_section27",
                         similarity      = similarity,
                         risk_level      = "CRITICAL",
                         risk_score      = risk_score,
                         section_number  = "Section 27",
                         section_title   = "Agreement in restraint of trade, void",
                         description     = "Non-compete clause",
                        )


def test_merge_with_empty_semantic_list_only_tags_source():
    keyword = [keyword_violation(1, 30), keyword_violation(2, 20)]
    merged  = merge_results(keyword, [])

    assert [violation.clause_id for violation in merged] == [1, 2]

    for original, combined in zip(keyword, merged):
        assert combined.match_source == "keyword"
        assert combined.semantic_similarity is None
        assert combined.to_dict()["riskScore"] == original.risk_score
        assert combined.matched_keywords == original.matched_keywords


def test_keyword_values_win_on_conflict():
    merged = merge_results([keyword_violation(3, 25)], [semantic_match(3, 45, similarity = 0.88)])

    assert len(merged) == 1

    entry = merged[0]

    assert entry.match_source == "both"
    assert entry.semantic_similarity == 0.88
    assert entry.risk_level == "HIGH"
    assert entry.risk_score == 25
    assert entry.section_number == "Section 73"


def test_semantic_only_clause_is_appended():
    merged = merge_results([keyword_violation(1, 20)], [semantic_match(5, 45)])
    entry  = merged[0]

    assert entry.clause_id == 5
    assert entry.match_source == "semantic"
    assert entry.matched_keywords == []
    assert entry.explanation == "Non-compete clause"


def test_sorted_by_score_with_stable_ties():
    merged = merge_results([keyword_violation(1, 10), keyword_violation(2, 30), keyword_violation(3, 10)], [semantic_match(4, 30)])

    assert [violation.clause_id for violation in merged] == [2, 4, 1, 3]


def test_unique_clause_ids():
    merged = merge_results([keyword_violation(1, 10), keyword_violation(1, 40)], [semantic_match(1, 45), semantic_match(1, 45)])

    assert len(merged) == 1
    assert merged[0].risk_score == 10


def test_match_source_breakdown_counts():
    merged = merge_results([keyword_violation(1, 10), keyword_violation(2, 20)], [semantic_match(2, 30), semantic_match(3, 30)])

    assert match_source_breakdown(merged) == {"keyword" : 1, "semantic" : 1, "both" : 1}


def test_semantic_only_violation_keeps_statute_text():
    match = semantic_match(4, 45)

    assert CombinedViolation.from_semantic(match).section_full_text == "Non-compete clause"

    match.section_full_text = "Every agreement by which any one is restrained from exercising a lawful profession, trade or business of any kind, is to that extent void."

    assert CombinedViolation.from_semantic(match).section_full_text.startswith("Every agreement by which any one is restrained")
