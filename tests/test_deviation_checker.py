# DEPENDENCIES
import pytest

from config.risk_rules import ContractType
from config.risk_rules import DeviationLevel
from services.data_models import Clause
from services.data_models import ContractContext
from services.deviation_checker import DeviationChecker


FREELANCE  = ContractContext(contract_type = ContractType.FREELANCE)
VENDOR     = ContractContext(contract_type = ContractType.VENDOR)
EMPLOYMENT = ContractContext(contract_type = ContractType.EMPLOYMENT)

SEVERITY   = {None                       : 0,
              DeviationLevel.MINOR       : 1,
              DeviationLevel.SIGNIFICANT : 2,
              DeviationLevel.EXTREME     : 3,
             }


def by_category(deviations):
    return {deviation.category: deviation for deviation in deviations}


def test_vendor_payment_at_critical_tier_is_extreme():
    deviations = DeviationChecker().check("The vendor agrees that payment shall be made within 120 days of invoice.", VENDOR)
    payment    = by_category(deviations)["Payment Terms"]

    assert payment.found_in_contract == "Net 120 days"
    assert payment.fair_standard == "Net 30 days"
    assert payment.deviation_level == DeviationLevel.EXTREME
    assert payment.legal_reference == "Section 73: Compensation for Breach"


@pytest.mark.parametrize("days, expected", [(44, None),
                                            (45, DeviationLevel.MINOR),
                                            (59, DeviationLevel.MINOR),
                                            (60, DeviationLevel.SIGNIFICANT),
                                            (89, DeviationLevel.SIGNIFICANT),
                                            (90, DeviationLevel.EXTREME),
                                           ])
def test_freelance_payment_tiers(days, expected):
    deviations = DeviationChecker().check(f"Payment within {days} days of invoice.", FREELANCE)
    payment    = by_category(deviations).get("Payment Terms")

    assert (payment.deviation_level if payment else None) == expected


def test_payment_severity_never_decreases_across_a_tier_boundary():
    checker = DeviationChecker()
    levels  = list()

    for days in range(30, 130, 1):
        payment = by_category(checker.check(f"Net {days} days from invoice date.", FREELANCE)).get("Payment Terms")
        levels.append(SEVERITY[payment.deviation_level if payment else None])

    assert levels == sorted(levels)


def test_net_terms_need_a_word_boundary():
    deviations = DeviationChecker().check("The internet 90 service plan is included.", FREELANCE)

    assert "Payment Terms" not in by_category(deviations)


def test_immediate_termination_is_extreme_with_matched_text():
    text       = "Scope is defined in Schedule A. The Client reserves the right to terminate immediately without notice."
    deviations = DeviationChecker().check(text, FREELANCE)
    notice     = by_category(deviations)["Termination Notice"]

    assert notice.deviation_level == DeviationLevel.EXTREME
    assert notice.found_in_contract == "Immediate termination without notice"
    assert notice.fair_standard == "15 days written notice"
    assert notice.matched_text == "The Client reserves the right to terminate immediately without notice."


def test_without_notice_needs_termination_context():
    assert "Termination Notice" not in by_category(DeviationChecker().check("Prices may change without notice.", FREELANCE))

    text   = "The Client may terminate this engagement without notice at any time."
    notice = by_category(DeviationChecker().check(text, FREELANCE))["Termination Notice"]

    assert notice.deviation_level == DeviationLevel.EXTREME
    assert notice.matched_text == text


def test_without_prior_notice_keeps_the_matched_sentence():
    text   = "Fees are fixed. The Client may terminate this engagement without prior notice. Other terms apply."
    notice = by_category(DeviationChecker().check(text, FREELANCE))["Termination Notice"]

    assert notice.deviation_level == DeviationLevel.EXTREME
    assert notice.matched_text == "The Client may terminate this engagement without prior notice."


def test_explicit_notice_period_suppresses_immediate_termination():
    text   = "Either party may terminate immediately by giving 2 days notice."
    notice = by_category(DeviationChecker().check(text, FREELANCE))["Termination Notice"]

    assert notice.found_in_contract == "2 days notice"
    assert notice.deviation_level == DeviationLevel.SIGNIFICANT


def test_long_notice_is_flagged_for_employment():
    notice = by_category(DeviationChecker().check("The employee must serve a notice period of 120 days.", EMPLOYMENT))["Termination Notice"]

    assert notice.found_in_contract == "120 days notice required"
    assert notice.deviation_level == DeviationLevel.EXTREME


def test_liability_findings():
    checker   = DeviationChecker()
    unlimited = by_category(checker.check("The Contractor accepts unlimited liability for any breach.", FREELANCE))["Liability Cap"]
    multiple  = by_category(checker.check("Liability is capped at 5x contract value.", FREELANCE))["Liability Cap"]

    assert unlimited.deviation_level == DeviationLevel.EXTREME
    assert unlimited.fair_standard == "Capped at 1x contract value"
    assert multiple.deviation_level == DeviationLevel.SIGNIFICANT
    assert multiple.found_in_contract == "5x contract value"
    assert "Liability Cap" not in by_category(checker.check("Liability is capped at 2x contract value.", FREELANCE))


def test_working_hours_findings():
    checker = DeviationChecker()

    assert by_category(checker.check("The Contractor must be available 24/7 for support.", FREELANCE))["Working Hours"].deviation_level == DeviationLevel.EXTREME

    hours = by_category(checker.check("Expected effort is 55 hours per week.", FREELANCE))["Working Hours"]

    assert hours.found_in_contract == "55 hours/week"
    assert hours.deviation_level == DeviationLevel.SIGNIFICANT


def test_confidentiality_findings():
    checker   = DeviationChecker()
    perpetual = by_category(checker.check("Confidential information must be protected in perpetuity.", FREELANCE))["Confidentiality Period"]
    long_term = by_category(checker.check("The confidentiality period of 12 years applies.", FREELANCE))["Confidentiality Period"]

    assert perpetual.deviation_level == DeviationLevel.EXTREME
    assert long_term.found_in_contract == "12 years"
    assert long_term.explanation == "12 years confidentiality is 10 years longer than standard."


def test_foreign_jurisdiction_is_significant():
    jurisdiction = by_category(DeviationChecker().check("This Agreement shall be governed by the laws of Singapore.", FREELANCE))["Jurisdiction"]

    assert jurisdiction.found_in_contract == "Singapore jurisdiction"
    assert jurisdiction.deviation_level == DeviationLevel.SIGNIFICANT
    assert jurisdiction.legal_reference.startswith("Section 28")


@pytest.mark.parametrize("years, expected", [(1, None),
                                             (2, DeviationLevel.SIGNIFICANT),
                                             (5, DeviationLevel.SIGNIFICANT),
                                             (6, DeviationLevel.EXTREME),
                                            ])
def test_non_compete_duration(years, expected):
    deviations = DeviationChecker().check(f"A non-compete period of {years} years applies after exit.", FREELANCE)
    restraint  = by_category(deviations).get("Non-Compete Clause")

    assert (restraint.deviation_level if restraint else None) == expected


def test_blanket_non_compete_without_time_limit():
    checker = DeviationChecker()
    blanket = by_category(checker.check("The Contractor shall not work for any competitor.", FREELANCE))["Non-Compete Clause"]

    assert blanket.deviation_level == DeviationLevel.EXTREME
    assert "Non-Compete Clause" not in by_category(checker.check("The Contractor shall not work for any competitor for a period of 6 months.", FREELANCE))


def test_categories_come_out_in_order_once_each():
    text       = ("Payment within 90 days of invoice. Net 120 days also applies. The Client may terminate immediately. "
                  "Unlimited liability applies. The Contractor must be available 24/7. "
                  "This Agreement is governed by the laws of England. The Contractor shall not work for any competitor.")
    deviations = DeviationChecker().check(text, FREELANCE)

    assert [deviation.category for deviation in deviations] == ["Payment Terms",
                                                                "Termination Notice",
                                                                "Liability Cap",
                                                                "Working Hours",
                                                                "Jurisdiction",
                                                                "Non-Compete Clause",
                                                               ]
    assert deviations[0].found_in_contract == "Net 90 days"


def test_clause_entry_point_skips_restraint_of_trade():
    clauses    = [Clause(id = 1, text = "The Contractor shall not work for any competitor.", position = 0),
                  Clause(id = 2, text = "Payment within 100 days of invoice.", position = 60),
                 ]
    categories = [deviation.category for deviation in DeviationChecker.check_clauses(clauses)]

    assert categories == ["Payment Terms"]


def test_repeated_checks_give_identical_results(sample_contract):
    checker = DeviationChecker()

    assert checker.check(sample_contract, VENDOR) == checker.check(sample_contract, VENDOR)
