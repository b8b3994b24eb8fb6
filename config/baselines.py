# DEPENDENCIES
from config.risk_rules import ContractType


INFINITY = float("inf")


class FairContractBaselines:
    """
    Fair-practice baselines for Indian contracts, per contract type

    Tiers are read as: standard (fair), warning (MINOR), danger (SIGNIFICANT), critical (EXTREME).
    Notice periods carry a direction: "below" means shorter is worse, "above" means longer is worse.
    """
    PAYMENT                = {ContractType.FREELANCE  : {"standard" : 30, "warning" : 45, "danger" : 60, "critical" : 90, "unit" : "days"},
                              ContractType.EMPLOYMENT : {"standard" : 30, "warning" : 45, "danger" : 60, "critical" : 90, "unit" : "days"},
                              ContractType.VENDOR     : {"standard" : 30, "warning" : 45, "danger" : 75, "critical" : 120, "unit" : "days"},
                              ContractType.CONSULTANT : {"standard" : 30, "warning" : 45, "danger" : 60, "critical" : 90, "unit" : "days"},
                              ContractType.GENERAL    : {"standard" : 30, "warning" : 45, "danger" : 60, "critical" : 90, "unit" : "days"},
                             }

    NOTICE_PERIOD          = {ContractType.FREELANCE  : {"standard" : 15, "warning" : 7, "danger" : 3, "critical" : 0, "unit" : "days", "direction" : "below"},
                              ContractType.EMPLOYMENT : {"standard" : 30, "warning" : 60, "danger" : 90, "critical" : 120, "unit" : "days", "direction" : "above"},
                              ContractType.VENDOR     : {"standard" : 30, "warning" : 15, "danger" : 7, "critical" : 0, "unit" : "days", "direction" : "below"},
                              ContractType.CONSULTANT : {"standard" : 15, "warning" : 7, "danger" : 3, "critical" : 0, "unit" : "days", "direction" : "below"},
                              ContractType.GENERAL    : {"standard" : 15, "warning" : 7, "danger" : 3, "critical" : 0, "unit" : "days", "direction" : "below"},
                             }

    LIABILITY_CAP          = {ContractType.FREELANCE  : {"standard" : 1.0, "warning" : 2.0, "danger" : 3.0, "critical" : INFINITY, "unit" : "times_contract"},
                              ContractType.EMPLOYMENT : {"standard" : 1.0, "warning" : 2.0, "danger" : 5.0, "critical" : INFINITY, "unit" : "times_contract"},
                              ContractType.VENDOR     : {"standard" : 1.5, "warning" : 3.0, "danger" : 5.0, "critical" : INFINITY, "unit" : "times_contract"},
                              ContractType.CONSULTANT : {"standard" : 1.0, "warning" : 2.0, "danger" : 3.0, "critical" : INFINITY, "unit" : "times_contract"},
                              ContractType.GENERAL    : {"standard" : 1.0, "warning" : 2.0, "danger" : 3.0, "critical" : INFINITY, "unit" : "times_contract"},
                             }

    WORKING_HOURS          = {ContractType.FREELANCE  : {"standard" : 40, "warning" : 45, "danger" : 50, "critical" : 60, "unit" : "hours_per_week"},
                              ContractType.EMPLOYMENT : {"standard" : 40, "warning" : 45, "danger" : 48, "critical" : 60, "unit" : "hours_per_week"},
                              ContractType.VENDOR     : {"standard" : 40, "warning" : 50, "danger" : 60, "critical" : 80, "unit" : "hours_per_week"},
                              ContractType.CONSULTANT : {"standard" : 40, "warning" : 45, "danger" : 50, "critical" : 60, "unit" : "hours_per_week"},
                              ContractType.GENERAL    : {"standard" : 40, "warning" : 48, "danger" : 55, "critical" : 60, "unit" : "hours_per_week"},
                             }

    CONFIDENTIALITY_PERIOD = {ContractType.FREELANCE  : {"standard" : 2, "warning" : 5, "danger" : 10, "critical" : INFINITY, "unit" : "years"},
                              ContractType.EMPLOYMENT : {"standard" : 2, "warning" : 5, "danger" : 10, "critical" : INFINITY, "unit" : "years"},
                              ContractType.VENDOR     : {"standard" : 3, "warning" : 5, "danger" : 10, "critical" : INFINITY, "unit" : "years"},
                              ContractType.CONSULTANT : {"standard" : 2, "warning" : 5, "danger" : 10, "critical" : INFINITY, "unit" : "years"},
                              ContractType.GENERAL    : {"standard" : 2, "warning" : 5, "danger" : 10, "critical" : INFINITY, "unit" : "years"},
                             }

    # Indian Contract Act, 1872 citations used by deviation findings
    ACT_REFERENCES         = {"free_consent"                   : {"section"     : "Section 14",
                                                                  "title"       : "Free Consent",
                                                                  "description" : "Consent is free when not caused by coercion, undue influence, fraud, or misrepresentation.",
                                                                 },
                              "lawful_object"                  : {"section"     : "Section 23",
                                                                  "title"       : "Lawful Consideration and Object",
                                                                  "description" : "Consideration or object is unlawful if forbidden by law, fraudulent, or opposed to public policy.",
                                                                 },
                              "restraint_of_trade"             : {"section"     : "Section 27",
                                                                  "title"       : "Agreement in Restraint of Trade",
                                                                  "description" : "Every agreement restraining anyone from exercising lawful profession, trade or business is to that extent void.",
                                                                 },
                              "restraint_of_legal_proceedings" : {"section"     : "Section 28",
                                                                  "title"       : "Agreements in Restraint of Legal Proceedings",
                                                                  "description" : "Agreements restricting enforcement of rights or extinguishing rights on expiry of specified period are void.",
                                                                 },
                              "time_essential"                 : {"section"     : "Section 55",
                                                                  "title"       : "Time-Essential Performance",
                                                                  "description" : "When time is essential, failure to perform at specified time makes contract voidable.",
                                                                 },
                              "breach_compensation"            : {"section"     : "Section 73",
                                                                  "title"       : "Compensation for Breach",
                                                                  "description" : "Compensation for loss or damage caused by breach, arising naturally from such breach.",
                                                                 },
                              "penalty"                        : {"section"     : "Section 74",
                                                                  "title"       : "Penalty Stipulation",
                                                                  "description" : "Party is entitled to reasonable compensation not exceeding penalty amount, whether or not actual damage proved.",
                                                                 },
                             }

    # Checked in order, first hit wins
    FOREIGN_JURISDICTIONS  = [(r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?(?:state of\s+)?(?:usa|united states|america)', "USA"),
                              (r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?(?:state of\s+)?delaware', "Delaware, USA"),
                              (r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?(?:state of\s+)?california', "California, USA"),
                              (r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?(?:state of\s+)?new york', "New York, USA"),
                              (r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?(?:uk|united kingdom|england|english law)', "United Kingdom"),
                              (r'(?:governed by|laws of|jurisdiction of)\s+(?:the\s+)?singapore', "Singapore"),
                              (r'arbitration\s+in\s+(?:singapore|uk|usa|london|new york)', "Foreign Arbitration"),
                             ]

    INDIAN_JURISDICTION    = "Indian courts (Mumbai/Delhi/Bangalore)"

    # Payment day-count extraction, tried in order
    PAYMENT_PATTERNS       = [r'payment\s+(?:within|in)\s+(\d+)\s*days',
                              r'\bnet\s+(\d+)',
                              r'(\d+)\s*days?\s+(?:from|after|of)\s+(?:invoice|receipt|completion)',
                              r'pay(?:able)?\s+within\s+(\d+)\s*days',
                             ]

    # The first two also mark an explicit notice period that suppresses the immediate-termination finding
    NOTICE_PATTERNS        = [r'(\d+)\s*days?\s+(?:written\s+)?notice',
                              r'notice\s+(?:period\s+)?(?:of\s+)?(\d+)\s*days?',
                              r'terminate\s+with\s+(\d+)\s*days?',
                             ]

    IMMEDIATE_TERMINATION  = ["immediate termination", "terminate immediately"]
    WITHOUT_NOTICE         = ["without notice", "without prior notice"]
    TERMINATION_CONTEXT    = ["termination clause", "right to terminate", "may terminate"]
    TERMINATION_WINDOW     = 150

    UNLIMITED_LIABILITY    = [r'unlimited\s+liability',
                              r'no\s+limit\s+on\s+liability',
                              r'full\s+liability\s+without\s+cap',
                              r'liable\s+for\s+all\s+damages?\s+without\s+(?:any\s+)?(?:cap|limit)',
                             ]

    LIABILITY_MULTIPLIER   = r'(\d+)x\s+(?:contract|project|fee|value)'

    ROUND_THE_CLOCK        = ["24/7", "24x7"]
    AVAILABILITY_CONTEXT   = ["available", "availability", "on call", "on-call"]
    HOURS_PER_WEEK         = r'(\d+)\s*hours?\s*(?:per|\/)\s*week'

    PERPETUAL_KEYWORDS     = ["perpetual", "forever", "indefinite", "in perpetuity", "without time limit", "no expiration"]
    CONFIDENTIAL_KEYWORDS  = ["confidential", "nda", "non-disclosure", "proprietary information", "trade secret"]
    CONFIDENTIAL_WINDOW    = 200

    CONFIDENTIAL_YEARS     = [r'confidential(?:ity)?\s+(?:for|period\s+of)\s+(\d+)\s*years?',
                              r'(\d+)\s*years?\s+(?:confidentiality|nda)',
                             ]

    NON_COMPETE_YEARS      = r'non-?compete\s+(?:clause|agreement|period)?\s*(?:of\s+)?(\d+)\s*years?'
    NON_COMPETE_EXTREME    = 5
    NON_COMPETE_SIGNIFICANT = 2
    BLANKET_NON_COMPETE    = ["shall not work for any competitor", "prohibited from working with competitors", "not engage in any competing business"]
    ANY_TIME_LIMIT         = r'for\s+(?:a\s+)?(?:period\s+of\s+)?(\d+)\s*(?:months?|years?)'


    @classmethod
    def get(cls, table: dict, contract_type: ContractType) -> dict:
        """
        Baseline tiers for a contract type, defaulting to the general tiers
        """
        return table.get(contract_type, table[ContractType.GENERAL])


    @classmethod
    def legal_reference(cls, key: str) -> str:
        reference = cls.ACT_REFERENCES[key]

        return f"{reference['section']}: {reference['title']}"
