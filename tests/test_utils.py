# DEPENDENCIES
import pytest

from config.settings import settings
from utils.logger import RiskEngineLogger
from utils.text_processor import TextProcessor
from utils.validators import ContractValidator


def test_phrases_in_context_window():
    text = "the client may terminate this agreement without notice"

    assert TextProcessor.has_phrases_in_context(text, ["without notice"], ["terminat"], 50)
    assert not TextProcessor.has_phrases_in_context(text, ["without notice"], ["terminat"], 10)
    assert not TextProcessor.has_phrases_in_context(text, ["immediately"], ["terminat"], 100)


def test_extract_matched_text_returns_the_sentence():
    text = "Fees are fixed. The Client may terminate immediately. Other terms apply."

    assert TextProcessor.extract_matched_text(text, "terminate immediately") == "The Client may terminate immediately."
    assert TextProcessor.extract_matched_text(text, "arbitration") is None


def test_clause_offsets():
    source = "Heading\n\nThe Contractor shall not compete.\n\nPayment in 30 days."
    clause = "The Contractor shall not compete."

    assert TextProcessor.find_clause_offsets(source, clause, 9) == (9, 9 + len(clause))
    assert TextProcessor.find_clause_offsets(source, clause, 0) == (9, 9 + len(clause))
    assert TextProcessor.find_clause_offsets(source, "THE CONTRACTOR SHALL NOT COMPETE.") == (9, 9 + len(clause))

    start, end = TextProcessor.find_clause_offsets(source, "Text that is nowhere in the source", 5)

    assert start == 5
    assert end <= len(source)


def test_first_int():
    assert TextProcessor.first_int([r'net\s+(\d+)', r'(\d+)\s*days'], "pay in 45 days") == 45
    assert TextProcessor.first_int([r'net\s+(\d+)'], "no terms") is None


def test_validator_rejects_non_strings_and_oversized_text(monkeypatch):
    with pytest.raises(ValueError):
        ContractValidator.validate_text(None)

    monkeypatch.setattr(settings, "MAX_CONTRACT_LENGTH", 10)

    with pytest.raises(ValueError):
        ContractValidator.validate_text("x" * 11)

    assert ContractValidator.validate_text("   ") == "   "


def test_validation_report(sample_contract):
    report = ContractValidator.get_validation_report(sample_contract)

    assert report["looks_like_contract"]
    assert not ContractValidator.get_validation_report("Shopping list: eggs, milk.")["looks_like_contract"]


@pytest.mark.anyio
async def test_execution_time_decorator_supports_coroutines():
    @RiskEngineLogger.log_execution_time("async_operation")
    async def double(value):
        return value * 2

    @RiskEngineLogger.log_execution_time("failing_operation")
    async def fail():
        raise KeyError("missing")

    assert await double(21) == 42

    with pytest.raises(KeyError):
        await fail()


def test_execution_time_decorator_supports_functions():
    @RiskEngineLogger.log_execution_time()
    def add(left, right):
        return left + right

    assert add(2, 3) == 5
    assert add.__name__ == "add"
