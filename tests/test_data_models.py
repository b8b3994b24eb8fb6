# DEPENDENCIES
from config.risk_rules import Industry
from config.risk_rules import ContractType
from config.risk_rules import DeviationLevel
from services.rule_store import RuleStore
from services.data_models import Clause
from services.data_models import Deviation
from services.data_models import SemanticResult
from services.data_models import ContractContext


def test_context_from_camel_and_snake_case():
    camel = ContractContext.from_dict({"contractType" : "Vendor", "industry" : "software", "contractValue" : "250000", "durationMonths" : 9})
    snake = ContractContext.from_dict({"contract_type" : "vendor", "contract_value" : 250000, "duration_months" : "9"})

    assert camel.contract_type == ContractType.VENDOR
    assert camel.industry == Industry.SOFTWARE
    assert camel.contract_value == 250000.0
    assert snake.duration_months == 9.0
    assert snake.contract_type == camel.contract_type


def test_context_unknown_values_use_defaults():
    context = ContractContext.from_dict({"contractType" : "partnership", "industry" : "mining", "contractValue" : "a lot"})

    assert context.contract_type == ContractType.FREELANCE
    assert context.industry == Industry.GENERAL
    assert context.contract_value is None
    assert ContractContext.from_dict(None) == ContractContext()


def test_context_serializes_in_camel_case():
    assert ContractContext(contract_type = ContractType.CONSULTANT).to_dict() == {"contractType"   : "consultant",
                                                                                  "industry"       : "general",
                                                                                  "contractValue"  : None,
                                                                                  "durationMonths" : None,
                                                                                  "userExperience" : None,
                                                                                 }


def test_clause_end_offset():
    clause = Clause(id = 1, text = "Payment in 30 days.", position = 10)

    assert clause.end == 29
    assert clause.to_dict() == {"id" : 1, "text" : "Payment in 30 days.", "position" : 10}


def test_semantic_result_status():
    assert SemanticResult().status() == {"status" : "ok", "matches" : 0}
    assert SemanticResult.disabled().status()["status"] == "disabled"

    failed = SemanticResult.failed(stage = "index", message = "empty")

    assert not failed.ok
    assert failed.status() == {"status" : "failed", "error" : {"stage" : "index", "message" : "empty"}}


def test_deviation_optional_fields_are_omitted():
    deviation = Deviation(category          = "Working Hours",
                          found_in_contract = "24/7 availability",
                          fair_standard     = "Up to 50 hours/week",
                          deviation_level   = DeviationLevel.EXTREME,
                          explanation       = "Round-the-clock availability is not sustainable.",
                         )

    assert set(deviation.to_dict()) == {"category", "foundInContract", "fairStandard", "deviationLevel", "explanation"}

    deviation.summary = "Ask for fixed working hours."

    assert deviation.to_dict()["summary"] == "Ask for fixed working hours."


def test_catalog_patterns_know_their_contract_types():
    pattern = RuleStore.default().get("s27_non_compete_01")

    assert pattern.applies_to(ContractType.FREELANCE)
    assert not pattern.applies_to(ContractType.VENDOR)
    assert pattern.index_text(2) == f"{pattern.description} non-compete non compete"
    assert pattern.index_metadata()["section_number"] == "Section 27"
