# DEPENDENCIES
import re
import sys
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from services.data_models import Clause
from utils.logger import RiskEngineLogger
from services.data_models import Deviation
from config.risk_rules import DeviationLevel
from utils.text_processor import TextProcessor
from services.data_models import ContractContext
from config.baselines import FairContractBaselines


class DeviationChecker:
    """
    Compare contract-wide terms against Indian fair-practice baselines

    Works on the whole text, independent of clause boundaries. Each category yields at most one Deviation (the first
    finding wins), in the order: Payment Terms, Termination Notice, Liability Cap, Working Hours, Confidentiality Period,
    Jurisdiction, Non-Compete Clause
    """
    def __init__(self, include_restraint_of_trade: bool = True):
        """
        Arguments:
        ----------
            include_restraint_of_trade { bool } : Also check non-compete duration and blanket non-competes
        """
        self.include_restraint_of_trade = include_restraint_of_trade
        self.baselines                  = FairContractBaselines


    @RiskEngineLogger.log_execution_time("check_deviations")
    def check(self, contract_text: str, context: Optional[ContractContext] = None) -> List[Deviation]:
        """
        Run every category check

        Arguments:
        ----------
            contract_text { str }             : Full contract text

            context       { ContractContext } : Contract type selects the baseline tiers (default: freelance)

        Returns:
        --------
                          { list }            : Deviations in category order
        """
        context = context or ContractContext()
        text    = contract_text.lower()

        checks  = [self.check_payment_terms(text, context),
                   self.check_notice_period(text, contract_text, context),
                   self.check_liability_cap(text, context),
                   self.check_working_hours(text, context),
                   self.check_confidentiality_period(text, context),
                   self.check_jurisdiction(text),
                  ]

        if self.include_restraint_of_trade:
            checks.append(self.check_restraint_of_trade(text))

        deviations = [deviation for deviation in checks if deviation is not None]

        log_info("Deviation check complete",
                 contract_type = context.contract_type.value,
                 deviations    = len(deviations),
                 categories    = [deviation.category for deviation in deviations],
                )

        return deviations


    @classmethod
    def check_clauses(cls, clauses: List[Clause]) -> List[Deviation]:
        """
        Clause-list entry point: joins clause texts and checks them with the default freelance/general context
        """
        checker = cls(include_restraint_of_trade = False)

        return checker.check("\n".join(clause.text for clause in clauses), ContractContext())


    def check_payment_terms(self, text: str, context: ContractContext) -> Optional[Deviation]:
        days = TextProcessor.first_int(self.baselines.PAYMENT_PATTERNS, text)

        if not days:
            return None

        baseline  = self.baselines.get(self.baselines.PAYMENT, context.contract_type)
        standard  = baseline["standard"]
        excess    = days - standard

        if (days >= baseline["critical"]):
            level       = DeviationLevel.EXTREME
            explanation = f"Payment in {days} days is {excess} days beyond the Indian standard of Net {standard}. This creates critical cash flow risk."

        elif (days >= baseline["danger"]):
            level       = DeviationLevel.SIGNIFICANT
            explanation = f"Payment terms of {days} days exceed the industry standard of {standard} days by {excess} days."

        elif (days >= baseline["warning"]):
            level       = DeviationLevel.MINOR
            explanation = f"Payment terms are {excess} days beyond standard, which is slightly slow but acceptable."

        else:
            return None

        return Deviation(category          = "Payment Terms",
                         found_in_contract = f"Net {days} days",
                         fair_standard     = f"Net {standard} days",
                         deviation_level   = level,
                         explanation       = explanation,
                         legal_reference   = self.baselines.legal_reference("breach_compensation"),
                        )


    def _immediate_termination_phrase(self, text: str) -> Optional[str]:
        """
        Phrase that signals termination without notice, or None

        The exact phrases count on their own; "without (prior) notice" also needs a "terminat..." word nearby and a
        termination-context phrase somewhere in the text
        """
        for phrase in self.baselines.IMMEDIATE_TERMINATION:
            if phrase in text:
                return phrase

        has_context = TextProcessor.contains_any(text, self.baselines.TERMINATION_CONTEXT)

        for phrase in self.baselines.WITHOUT_NOTICE:
            if has_context and TextProcessor.has_phrases_in_context(text, [phrase], ["terminat"], self.baselines.TERMINATION_WINDOW):
                return phrase

        return None


    def check_notice_period(self, text: str, original_text: str, context: ContractContext) -> Optional[Deviation]:
        baseline        = self.baselines.get(self.baselines.NOTICE_PERIOD, context.contract_type)
        standard        = baseline["standard"]
        legal_reference = self.baselines.legal_reference("time_essential")
        explicit_notice = TextProcessor.first_int(self.baselines.NOTICE_PATTERNS[:2], text) is not None
        phrase          = self._immediate_termination_phrase(text)

        if phrase and not explicit_notice:
            return Deviation(category          = "Termination Notice",
                             found_in_contract = "Immediate termination without notice",
                             fair_standard     = f"{standard} days written notice",
                             deviation_level   = DeviationLevel.EXTREME,
                             explanation       = f"Allowing immediate termination without notice is unfair. Standard practice requires {standard} days notice.",
                             legal_reference   = legal_reference,
                             matched_text      = TextProcessor.extract_matched_text(original_text, phrase, 200),
                            )

        notice_days = TextProcessor.first_int(self.baselines.NOTICE_PATTERNS, text)

        if notice_days is None:
            return None

        if (baseline["direction"] == "below"):
            found = f"{notice_days} days notice"

            if (notice_days <= baseline["critical"]):
                level       = DeviationLevel.EXTREME
                explanation = f"{notice_days} days notice is too short for {context.contract_type.value} contracts."

            elif (notice_days <= baseline["danger"]):
                level       = DeviationLevel.SIGNIFICANT
                explanation = f"Notice period of {notice_days} days is shorter than the recommended {standard} days."

            else:
                return None

        else:
            found = f"{notice_days} days notice required"

            if (notice_days >= baseline["critical"]):
                level       = DeviationLevel.EXTREME
                explanation = f"{notice_days} days notice is excessively long and locks you in unfairly."

            elif (notice_days >= baseline["danger"]):
                level       = DeviationLevel.SIGNIFICANT
                explanation = f"Notice period of {notice_days} days is longer than standard {standard} days."

            else:
                return None

        return Deviation(category          = "Termination Notice",
                         found_in_contract = found,
                         fair_standard     = f"{standard} days notice",
                         deviation_level   = level,
                         explanation       = explanation,
                         legal_reference   = legal_reference,
                        )


    def check_liability_cap(self, text: str, context: ContractContext) -> Optional[Deviation]:
        baseline        = self.baselines.get(self.baselines.LIABILITY_CAP, context.contract_type)
        standard        = self._format_multiple(baseline["standard"])
        legal_reference = self.baselines.legal_reference("penalty")

        if any(re.search(pattern, text) for pattern in self.baselines.UNLIMITED_LIABILITY):
            return Deviation(category          = "Liability Cap",
                             found_in_contract = "Unlimited liability",
                             fair_standard     = f"Capped at {standard}x contract value",
                             deviation_level   = DeviationLevel.EXTREME,
                             explanation       = f"Unlimited liability is extremely risky. Fair contracts cap liability at {standard}x the contract value.",
                             legal_reference   = legal_reference,
                            )

        multiple = TextProcessor.first_int([self.baselines.LIABILITY_MULTIPLIER], text)

        if (multiple is None) or (multiple < baseline["danger"]):
            return None

        return Deviation(category          = "Liability Cap",
                         found_in_contract = f"{multiple}x contract value",
                         fair_standard     = f"{standard}x contract value",
                         deviation_level   = DeviationLevel.SIGNIFICANT,
                         explanation       = f"Liability of {multiple}x contract value is higher than the standard {standard}x.",
                         legal_reference   = legal_reference,
                        )


    def check_working_hours(self, text: str, context: ContractContext) -> Optional[Deviation]:
        baseline = self.baselines.get(self.baselines.WORKING_HOURS, context.contract_type)
        standard = baseline["standard"]

        if TextProcessor.contains_any(text, self.baselines.ROUND_THE_CLOCK) and TextProcessor.contains_any(text, self.baselines.AVAILABILITY_CONTEXT):
            return Deviation(category          = "Working Hours",
                             found_in_contract = "24/7 availability required",
                             fair_standard     = f"{standard} hours/week",
                             deviation_level   = DeviationLevel.EXTREME,
                             explanation       = f"Requiring 24/7 availability is unreasonable. Standard is {standard} hours per week.",
                            )

        hours = TextProcessor.first_int([self.baselines.HOURS_PER_WEEK], text)

        if hours is None:
            return None

        if (hours >= baseline["critical"]):
            level       = DeviationLevel.EXTREME
            explanation = f"{hours} hours per week exceeds legal limits and may violate labor laws."

        elif (hours >= baseline["danger"]):
            level       = DeviationLevel.SIGNIFICANT
            explanation = f"{hours} hours per week is above the standard {standard} hours."

        else:
            return None

        return Deviation(category          = "Working Hours",
                         found_in_contract = f"{hours} hours/week",
                         fair_standard     = f"{standard} hours/week",
                         deviation_level   = level,
                         explanation       = explanation,
                        )


    def _has_perpetual_confidentiality(self, text: str) -> bool:
        for perpetual in self.baselines.PERPETUAL_KEYWORDS:
            if (perpetual in text) and TextProcessor.has_phrases_in_context(text, [perpetual], self.baselines.CONFIDENTIAL_KEYWORDS, self.baselines.CONFIDENTIAL_WINDOW):
                return True

        return False


    def check_confidentiality_period(self, text: str, context: ContractContext) -> Optional[Deviation]:
        baseline        = self.baselines.get(self.baselines.CONFIDENTIALITY_PERIOD, context.contract_type)
        standard        = baseline["standard"]
        legal_reference = self.baselines.legal_reference("lawful_object")
        years           = TextProcessor.first_int(self.baselines.CONFIDENTIAL_YEARS, text)

        if (years is None) and self._has_perpetual_confidentiality(text):
            return Deviation(category          = "Confidentiality Period",
                             found_in_contract = "Perpetual/indefinite confidentiality",
                             fair_standard     = f"{standard} years",
                             deviation_level   = DeviationLevel.EXTREME,
                             explanation       = f"Perpetual confidentiality is excessive. Standard NDA duration is {standard}-{baseline['warning']} years.",
                             legal_reference   = legal_reference,
                            )

        if (years is None) or (years < baseline["danger"]):
            return None

        return Deviation(category          = "Confidentiality Period",
                         found_in_contract = f"{years} years",
                         fair_standard     = f"{standard} years",
                         deviation_level   = DeviationLevel.SIGNIFICANT,
                         explanation       = f"{years} years confidentiality is {years - standard} years longer than standard.",
                         legal_reference   = legal_reference,
                        )


    def check_jurisdiction(self, text: str) -> Optional[Deviation]:
        for pattern, name in self.baselines.FOREIGN_JURISDICTIONS:
            if re.search(pattern, text):
                return Deviation(category          = "Jurisdiction",
                                 found_in_contract = f"{name} jurisdiction",
                                 fair_standard     = self.baselines.INDIAN_JURISDICTION,
                                 deviation_level   = DeviationLevel.SIGNIFICANT,
                                 explanation       = f"Disputes under {name} law are expensive and impractical for Indian freelancers. Try to negotiate Indian jurisdiction.",
                                 legal_reference   = self.baselines.legal_reference("restraint_of_legal_proceedings"),
                                )

        return None


    def check_restraint_of_trade(self, text: str) -> Optional[Deviation]:
        legal_reference = self.baselines.legal_reference("restraint_of_trade")
        years           = TextProcessor.first_int([self.baselines.NON_COMPETE_YEARS], text)

        if (years is not None) and (years >= self.baselines.NON_COMPETE_SIGNIFICANT):
            level = DeviationLevel.EXTREME if (years > self.baselines.NON_COMPETE_EXTREME) else DeviationLevel.SIGNIFICANT

            return Deviation(category          = "Non-Compete Clause",
                             found_in_contract = f"{years} year non-compete",
                             fair_standard     = "1-2 years (or void under Section 27)",
                             deviation_level   = level,
                             explanation       = (f"A {years}-year non-compete may be void under Indian Contract Act Section 27. Non-compete agreements "
                                                  f"are generally unenforceable in India except for business sale goodwill protection."),
                             legal_reference   = legal_reference,
                            )

        blanket        = TextProcessor.contains_any(text, self.baselines.BLANKET_NON_COMPETE)
        has_time_limit = re.search(self.baselines.ANY_TIME_LIMIT, text) is not None

        if blanket and not has_time_limit:
            return Deviation(category          = "Non-Compete Clause",
                             found_in_contract = "Blanket non-compete without time limit",
                             fair_standard     = "Generally void under Section 27",
                             deviation_level   = DeviationLevel.EXTREME,
                             explanation       = ("Blanket non-compete clauses without reasonable limits are void under Indian Contract Act Section 27. "
                                                  "Agreements restraining anyone from exercising lawful trade are unenforceable."),
                             legal_reference   = legal_reference,
                            )

        return None


    @staticmethod
    def _format_multiple(value: float) -> str:
        return str(int(value)) if float(value).is_integer() else str(value)
