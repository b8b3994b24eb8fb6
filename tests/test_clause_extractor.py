# DEPENDENCIES
import pytest

from services.data_models import SegmentationError
from services.clause_extractor import ClauseSegmenter


def assert_exact_slices(text, clauses):
    previous_end = 0

    for expected_id, clause in enumerate(clauses, start = 1):
        assert clause.id == expected_id
        assert text[clause.position:clause.end] == clause.text
        assert clause.position >= previous_end
        previous_end = clause.end


def test_blank_text_raises_segmentation_error():
    segmenter = ClauseSegmenter()

    with pytest.raises(SegmentationError):
        segmenter.segment("   \n\t  ")

    with pytest.raises(ValueError):
        segmenter.segment("")


def test_sample_contract_clauses_are_exact_slices(sample_contract):
    clauses = ClauseSegmenter().segment(sample_contract)

    assert len(clauses) == 4
    assert_exact_slices(sample_contract, clauses)


def test_heading_merges_into_following_clause():
    text    = "1. Services\n\nThe Contractor shall deliver the software.\n\n2. Payment\nPayment within 30 days of invoice."
    clauses = ClauseSegmenter().segment(text)

    assert [clause.text for clause in clauses] == ["1. Services\n\nThe Contractor shall deliver the software.",
                                                   "2. Payment\nPayment within 30 days of invoice.",
                                                  ]
    assert clauses[0].position == 0


def test_line_leading_numbering_splits_a_block():
    text    = "1.1 First term applies here.\n1.2 Second term applies here.\n(a) A lettered item follows."
    clauses = ClauseSegmenter().segment(text)

    assert [clause.text for clause in clauses] == ["1.1 First term applies here.",
                                                   "1.2 Second term applies here.",
                                                   "(a) A lettered item follows.",
                                                  ]
    assert_exact_slices(text, clauses)


def test_long_block_is_split_on_sentence_boundaries():
    sentence = "The Contractor shall keep records. "
    text     = (sentence * 6).strip()
    clauses  = ClauseSegmenter(max_clause_length = 80).segment(text)

    assert len(clauses) > 1
    assert all(len(clause.text) <= 80 for clause in clauses)
    assert_exact_slices(text, clauses)


def test_trailing_heading_is_kept():
    text    = "The Contractor shall deliver the software.\n\nSCHEDULE A"
    clauses = ClauseSegmenter().segment(text)

    assert clauses[-1].text == "SCHEDULE A"
    assert_exact_slices(text, clauses)


def test_segmentation_is_deterministic(sample_contract):
    segmenter = ClauseSegmenter()

    assert segmenter.segment(sample_contract) == segmenter.segment(sample_contract)
