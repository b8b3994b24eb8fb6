# DEPENDENCIES
from config.settings import settings


GOV_URL      = settings.GOV_URL

ALL          = "all"


# Indian Contract Act, 1872 sections referenced by the catalog
ACT_SECTIONS = {"Section 10"  : {"title"     : "What agreements are contracts",
                                 "full_text" : "All agreements are contracts if they are made by the free consent of parties competent to contract, for a lawful consideration and with a lawful object, and are not hereby expressly declared to be void.",
                                },
                "Section 14"  : {"title"     : "Free consent defined",
                                 "full_text" : "Consent is said to be free when it is not caused by coercion, undue influence, fraud, misrepresentation or mistake.",
                                },
                "Section 15"  : {"title"     : "Coercion defined",
                                 "full_text" : "Coercion is the committing, or threatening to commit, any act forbidden by the Indian Penal Code, or the unlawful detaining of any property, with the intention of causing any person to enter into an agreement.",
                                },
                "Section 16"  : {"title"     : "Undue influence defined",
                                 "full_text" : "A contract is said to be induced by undue influence where the relations subsisting between the parties are such that one of the parties is in a position to dominate the will of the other and uses that position to obtain an unfair advantage over the other.",
                                },
                "Section 17"  : {"title"     : "Fraud defined",
                                 "full_text" : "Fraud includes the active concealment of a fact by one having knowledge or belief of the fact, and any other act fitted to deceive, done with intent to induce another party to enter into the contract.",
                                },
                "Section 23"  : {"title"     : "What considerations and objects are lawful",
                                 "full_text" : "The consideration or object of an agreement is lawful unless it is forbidden by law, is of such a nature that it would defeat any law, is fraudulent, involves injury to the person or property of another, or the Court regards it as immoral or opposed to public policy.",
                                },
                "Section 27"  : {"title"     : "Agreement in restraint of trade void",
                                 "full_text" : "Every agreement by which any one is restrained from exercising a lawful profession, trade or business of any kind, is to that extent void. Exception: one who sells the goodwill of a business may agree with the buyer to refrain from carrying on a similar business within specified local limits.",
                                },
                "Section 28"  : {"title"     : "Agreement in restraint of legal proceedings void",
                                 "full_text" : "Every agreement by which any party is restricted absolutely from enforcing his rights under or in respect of any contract by the usual legal proceedings in the ordinary tribunals, or which limits the time within which he may thus enforce his rights, is void to that extent.",
                                },
                "Section 73"  : {"title"     : "Compensation for loss or damage caused by breach of contract",
                                 "full_text" : "When a contract has been broken, the party who suffers by such breach is entitled to receive compensation for any loss or damage caused to him thereby, which naturally arose in the usual course of things from such breach. Such compensation is not to be given for any remote and indirect loss or damage sustained by reason of the breach.",
                                },
                "Section 74"  : {"title"     : "Compensation for breach of contract where penalty stipulated for",
                                 "full_text" : "When a contract has been broken, if a sum is named in the contract as the amount to be paid in case of such breach, or if the contract contains any other stipulation by way of penalty, the party complaining of the breach is entitled to receive reasonable compensation not exceeding the amount so named or the penalty stipulated for.",
                                },
                "Section 124" : {"title"     : "Contract of indemnity defined",
                                 "full_text" : "A contract by which one party promises to save the other from loss caused to him by the conduct of the promisor himself, or by the conduct of any other person, is called a contract of indemnity.",
                                },
               }


# Full catalog, in match order: the keyword channel stops at the first hit per clause
CLAUSE_PATTERNS = [
    # CRITICAL: Section 27 (restraint of trade)
    {"pattern_id"       : "s27_non_compete_01",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["non-compete", "non compete", "shall not compete", "agree not to compete", "not to compete"],
     "regex"            : r"(shall|will|agree)\s+(not|to not)\s+compete",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 27",
     "description"      : "Non-compete clause restricting the right to work after the engagement",
     "explanation"      : "Non-compete clauses are void in India under Section 27. You cannot be stopped from earning a living in your own profession once the contract ends.",
     "context_required" : ["freelance", "consultant"],
     "industry_tags"    : ALL,
     "modifiers"        : {"goodwill_sale_exception" : -20, "affects_livelihood" : 10},
    },
    {"pattern_id"       : "s27_non_compete_02",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["restraint of trade", "restrained from exercising", "not engage in similar"],
     "regex"            : r"restrain(ed|t)?\s+(from|of)\s+(trade|business|profession)",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 27",
     "description"      : "Clause restraining the exercise of a lawful trade, business or profession",
     "explanation"      : "Any agreement that restrains you from exercising a lawful trade or profession is void to that extent under Section 27.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s27_non_compete_03",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["cannot work for competitor", "not work for any competitor", "prohibited from joining"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 27",
     "description"      : "Prohibition on working for competitors of the client",
     "explanation"      : "A ban on working for competitors restricts your livelihood and is generally unenforceable in India.",
     "context_required" : ["freelance", "consultant", "employment"],
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s27_non_compete_04",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["exclusive engagement", "work exclusively", "exclusively devoted", "sole service"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 40,
     "section"          : "Section 27",
     "description"      : "Exclusivity requirement preventing work for other clients",
     "explanation"      : "Requiring a freelancer to work exclusively for one client acts as a restraint of trade and can be void under Section 27.",
     "context_required" : ["freelance", "consultant"],
     "industry_tags"    : ALL,
     "modifiers"        : {"part_time_contract" : -15},
    },
    {"pattern_id"       : "s27_non_compete_05",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["not provide similar services", "refrain from offering", "not engage in any business"],
     "regex"            : r"not\s+(provide|offer|engage in)\s+(similar|competing|same)",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 27",
     "description"      : "Prohibition on offering similar services to others",
     "explanation"      : "Stopping you from offering similar services to anyone else restrains your trade and is void under Section 27.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s27_non_solicit_01",
     "violation_type"   : "non_solicitation_section27",
     "keywords"         : ["shall not solicit", "not solicit clients", "no solicitation", "refrain from soliciting"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 40,
     "section"          : "Section 27",
     "description"      : "Non-solicitation restriction on clients or staff",
     "explanation"      : "Broad non-solicitation terms that outlive the contract can restrain your trade and may be void under Section 27.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
     "modifiers"        : {"during_contract_only" : -25},
    },

    # CRITICAL: Section 28 (restraint of legal proceedings)
    {"pattern_id"       : "s28_legal_waiver_01",
     "violation_type"   : "legal_waiver_section28",
     "keywords"         : ["waive right to sue", "waive all rights", "no legal action", "forfeit legal rights"],
     "regex"            : r"waive(s)?\s+(all|any)?\s*(right|rights)\s+to\s+(sue|legal)",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 50,
     "section"          : "Section 28",
     "description"      : "Waiver of the right to bring legal proceedings",
     "explanation"      : "You cannot be made to give up your right to go to court. Such waivers are void under Section 28.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s28_legal_waiver_02",
     "violation_type"   : "legal_waiver_section28",
     "keywords"         : ["cannot bring claim", "barred from litigation", "prohibited from suing"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 50,
     "section"          : "Section 28",
     "description"      : "Bar on bringing claims or litigation",
     "explanation"      : "An absolute bar on legal claims restrains legal proceedings and is void under Section 28.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s28_time_limit_01",
     "violation_type"   : "legal_waiver_section28",
     "keywords"         : ["claims within 30 days", "must claim within", "time-barred after"],
     "regex"            : r"(claim|action)\s+within\s+(\d+)\s+(day|week)",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 28",
     "description"      : "Shortened time limit for bringing claims",
     "explanation"      : "Cutting down the time you have to bring a claim below the statutory limitation period is void under Section 28.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
     "modifiers"        : {"limitation_over_1_year" : -30},
    },

    # CRITICAL: Section 23 (unlawful object)
    {"pattern_id"       : "s23_unlawful_01",
     "violation_type"   : "unlawful_object_section23",
     "keywords"         : ["illegal purpose", "unlawful activity", "against the law", "circumvent law"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 50,
     "section"          : "Section 23",
     "description"      : "Agreement with an unlawful object or purpose",
     "explanation"      : "An agreement whose object is unlawful is void under Section 23 and may expose you to liability.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s23_unlawful_02",
     "violation_type"   : "unlawful_object_section23",
     "keywords"         : ["evade tax", "tax avoidance scheme", "circumvent regulations", "avoid compliance"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 50,
     "section"          : "Section 23",
     "description"      : "Arrangement designed to evade tax or regulation",
     "explanation"      : "Terms designed to defeat a law, such as tax evasion, make the agreement void under Section 23.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s23_public_policy_01",
     "violation_type"   : "unlawful_object_section23",
     "keywords"         : ["against public policy", "contrary to public interest", "immoral purpose"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 23",
     "description"      : "Object opposed to public policy or immoral",
     "explanation"      : "Objects that a court regards as immoral or opposed to public policy are unlawful under Section 23.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # CRITICAL: Sections 15-17 (free consent)
    {"pattern_id"       : "s15_coercion_01",
     "violation_type"   : "coercion_section15",
     "keywords"         : ["must sign immediately", "sign or lose", "no time to review", "take it or leave it"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 40,
     "section"          : "Section 15",
     "description"      : "Pressure to sign without time to consider the terms",
     "explanation"      : "Consent obtained under pressure is not free consent, and the contract may be voidable at your option.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s16_undue_influence_01",
     "violation_type"   : "undue_influence_section16",
     "keywords"         : ["cannot consult lawyer", "confidential do not share", "do not discuss with anyone"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 40,
     "section"          : "Section 16",
     "description"      : "Restriction on seeking independent advice before signing",
     "explanation"      : "Preventing you from taking independent advice suggests undue influence, which makes the contract voidable.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s17_fraud_01",
     "violation_type"   : "fraud_section17",
     "keywords"         : ["concealed material fact", "hidden terms", "undisclosed conditions"],
     "risk_level"       : "CRITICAL",
     "risk_score"       : 45,
     "section"          : "Section 17",
     "description"      : "Concealed or undisclosed material terms",
     "explanation"      : "Active concealment of material facts is fraud under Section 17, and a contract induced by fraud is voidable.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # HIGH: Sections 74 and 73 (penalty and damages)
    {"pattern_id"       : "s74_penalty_01",
     "violation_type"   : "excessive_penalty_section74",
     "keywords"         : ["penalty of", "liquidated damages of", "penalty equal to", "forfeit entire"],
     "regex"            : r"penalty\s+(of|equal to)\s+[₹$]?\s*\d+",
     "risk_level"       : "HIGH",
     "risk_score"       : 30,
     "section"          : "Section 74",
     "description"      : "Fixed penalty payable on breach",
     "explanation"      : "Under Section 74 only reasonable compensation up to the stated amount is recoverable, so a harsh penalty may not be enforced in full.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s74_penalty_02",
     "violation_type"   : "excessive_penalty_section74",
     "keywords"         : ["10x project value", "5x contract value", "multiple of fees"],
     "regex"            : r"(\d+)x\s+(project|contract|fee)",
     "risk_level"       : "HIGH",
     "risk_score"       : 35,
     "section"          : "Section 74",
     "description"      : "Penalty expressed as a multiple of the contract value",
     "explanation"      : "A penalty worth several times the contract value is out of proportion to any real loss and is likely to be cut down under Section 74.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s74_penalty_daily_01",
     "violation_type"   : "excessive_penalty_section74",
     "keywords"         : ["per day delay", "daily penalty", "per diem damages", "for each day"],
     "regex"            : r"(₹|\$)?\s*\d+\s+(per|each)\s+day",
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 74",
     "description"      : "Daily penalty for delay",
     "explanation"      : "Daily penalties add up quickly and can exceed the value of the work. Section 74 limits recovery to reasonable compensation.",
     "context_required" : ["freelance", "vendor"],
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s73_liability_01",
     "violation_type"   : "unlimited_liability_section73",
     "keywords"         : ["unlimited liability", "no limit on liability", "without limitation"],
     "risk_level"       : "HIGH",
     "risk_score"       : 30,
     "section"          : "Section 73",
     "description"      : "Unlimited liability for breach",
     "explanation"      : "Section 73 only allows compensation for losses that naturally arise from a breach. Unlimited liability exposes you far beyond that.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s73_liability_02",
     "violation_type"   : "unlimited_liability_section73",
     "keywords"         : ["consequential damages", "indirect damages", "special damages", "incidental damages"],
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 73",
     "description"      : "Liability for consequential or indirect damages",
     "explanation"      : "Section 73 excludes remote and indirect losses. Accepting liability for them widens your exposure beyond what the law requires.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s73_liability_03",
     "violation_type"   : "unlimited_liability_section73",
     "keywords"         : ["loss of profits", "lost revenue", "business losses"],
     "risk_level"       : "HIGH",
     "risk_score"       : 25,
     "section"          : "Section 73",
     "description"      : "Liability for the client's lost profits",
     "explanation"      : "Being liable for the client's lost profits can cost far more than your fee.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # HIGH: intellectual property
    {"pattern_id"       : "ip_blanket_01",
     "violation_type"   : "blanket_ip_transfer",
     "keywords"         : ["all intellectual property belongs", "assign all rights title", "waive moral rights"],
     "risk_level"       : "HIGH",
     "risk_score"       : 30,
     "section"          : "Section 27",
     "description"      : "Blanket transfer of all intellectual property",
     "explanation"      : "Handing over every right in your work, including moral rights, leaves you unable to reuse your own skills and tools.",
     "context_required" : ALL,
     "industry_tags"    : ["software", "design", "content", "video"],
    },
    {"pattern_id"       : "ip_blanket_02",
     "violation_type"   : "blanket_ip_transfer",
     "keywords"         : ["whether related to project or not", "all ideas conceived", "inventions during term"],
     "risk_level"       : "HIGH",
     "risk_score"       : 35,
     "section"          : "Section 27",
     "description"      : "IP assignment covering work unrelated to the project",
     "explanation"      : "Claiming ownership of everything you create during the term, even unrelated work, acts as a restraint on your trade.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "ip_retroactive_01",
     "violation_type"   : "blanket_ip_transfer",
     "keywords"         : ["pre-existing materials", "prior work", "background ip", "existing inventions"],
     "regex"            : r"(all|any)\s+(pre-existing|prior|background)\s+(ip|work|material)",
     "risk_level"       : "HIGH",
     "risk_score"       : 32,
     "section"          : "Section 27",
     "description"      : "Transfer of pre-existing or background IP",
     "explanation"      : "Your pre-existing work and tools should stay yours. Assigning them away means paying twice for your own assets.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "ip_portfolio_01",
     "violation_type"   : "indirect_non_compete_portfolio",
     "keywords"         : ["cannot showcase", "not display work", "prohibit portfolio", "no portfolio rights"],
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 27",
     "description"      : "Ban on showing the work in a portfolio",
     "explanation"      : "Without portfolio rights you cannot show your work to future clients, which indirectly restrains your trade.",
     "context_required" : ["freelance", "consultant"],
     "industry_tags"    : ["design", "software", "video", "writing"],
    },

    # HIGH: payment, termination, indemnity
    {"pattern_id"       : "payment_90plus_01",
     "violation_type"   : "unfair_payment_terms",
     "keywords"         : ["payment within 90 days", "net 90", "ninety days", "120 days"],
     "regex"            : r"(payment|pay)\s+(within|in)\s+(90|120|180)\s+days",
     "risk_level"       : "HIGH",
     "risk_score"       : 25,
     "section"          : "Section 73",
     "description"      : "Payment terms of 90 days or longer",
     "explanation"      : "Waiting three months or more to be paid creates serious cash flow risk. Net 30 is the common standard.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "payment_conditional_01",
     "violation_type"   : "unfair_payment_terms",
     "keywords"         : ["pay when paid", "when client pays", "subject to client receipt", "conditional on"],
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 73",
     "description"      : "Payment conditional on a third party paying first",
     "explanation"      : "Pay-when-paid terms shift the client's collection risk onto you, and you may never be paid for finished work.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "termination_unilateral_01",
     "violation_type"   : "unilateral_termination",
     "keywords"         : ["terminate at will", "terminate without cause", "immediate termination without notice"],
     "risk_level"       : "HIGH",
     "risk_score"       : 25,
     "section"          : "Section 73",
     "description"      : "One-sided right to terminate without cause or notice",
     "explanation"      : "A one-sided right to end the contract at any time leaves you without income security.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
     "modifiers"        : {"mutual_right" : -15},
    },
    {"pattern_id"       : "termination_no_payment_01",
     "violation_type"   : "unilateral_termination",
     "keywords"         : ["no payment for incomplete", "forfeit payment on termination", "no prorated payment"],
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 73",
     "description"      : "No payment for work done before termination",
     "explanation"      : "You should be paid for work already done. Forfeiting it on termination is unfair and may be challenged under Section 73.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s124_indemnity_01",
     "violation_type"   : "unlimited_indemnity",
     "keywords"         : ["indemnify and hold harmless", "unlimited indemnification", "full indemnity"],
     "risk_level"       : "HIGH",
     "risk_score"       : 28,
     "section"          : "Section 124",
     "description"      : "Broad indemnity obligation",
     "explanation"      : "A broad indemnity makes you cover the client's losses, possibly including losses you did not cause.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "s124_indemnity_02",
     "violation_type"   : "unlimited_indemnity",
     "keywords"         : ["any and all claims", "third party claims", "defend at own expense"],
     "risk_level"       : "HIGH",
     "risk_score"       : 25,
     "section"          : "Section 124",
     "description"      : "Indemnity covering all third party claims at your cost",
     "explanation"      : "Defending every third party claim at your own expense can cost more than the whole contract is worth.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # MEDIUM
    {"pattern_id"       : "payment_60_89_01",
     "violation_type"   : "delayed_payment",
     "keywords"         : ["payment within 60 days", "net 60", "sixty days", "payment within 75 days"],
     "regex"            : r"(payment|pay)\s+(within|in)\s+(60|75|89)\s+days",
     "risk_level"       : "MEDIUM",
     "risk_score"       : 18,
     "section"          : "Section 73",
     "description"      : "Payment terms of 60 to 89 days",
     "explanation"      : "Two months or more to get paid is slower than the Net 30 standard and strains cash flow.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "scope_creep_01",
     "violation_type"   : "scope_creep",
     "keywords"         : ["unlimited revisions", "any revisions", "revisions at no cost", "free revisions"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 73",
     "description"      : "Unlimited revisions without extra pay",
     "explanation"      : "Unlimited free revisions let the project grow without any increase in your fee.",
     "context_required" : ALL,
     "industry_tags"    : ["design", "writing", "video", "software"],
    },
    {"pattern_id"       : "scope_creep_02",
     "violation_type"   : "scope_creep",
     "keywords"         : ["scope may change", "additional work without", "other duties as assigned"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 18,
     "section"          : "Section 73",
     "description"      : "Open-ended scope that can change without compensation",
     "explanation"      : "An open-ended scope means extra work can be demanded without extra pay.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "jurisdiction_foreign_01",
     "violation_type"   : "foreign_jurisdiction",
     "keywords"         : ["governed by laws of usa", "courts of delaware", "california law", "new york jurisdiction"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 23",
     "description"      : "Disputes governed by United States law or courts",
     "explanation"      : "Fighting a dispute in a US court is expensive and impractical for an Indian freelancer.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "jurisdiction_foreign_02",
     "violation_type"   : "foreign_jurisdiction",
     "keywords"         : ["uk jurisdiction", "english law", "singapore courts", "arbitration in singapore"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 23",
     "description"      : "Disputes governed by UK or Singapore law or forums",
     "explanation"      : "Foreign courts or arbitration seats make enforcing your rights costly and slow.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "nda_perpetual_01",
     "violation_type"   : "overbroad_confidentiality",
     "keywords"         : ["perpetual confidentiality", "indefinite confidentiality", "forever confidential"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 27",
     "description"      : "Confidentiality obligation without an end date",
     "explanation"      : "Confidentiality that never ends can restrict how you use your own knowledge and skills for the rest of your career.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "nda_overbroad_01",
     "violation_type"   : "overbroad_confidentiality",
     "keywords"         : ["all information confidential", "any information disclosed", "everything is confidential"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 12,
     "section"          : "Section 27",
     "description"      : "Confidentiality covering all information without limits",
     "explanation"      : "Treating every piece of information as confidential makes it hard to know what you may lawfully use elsewhere.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "liability_high_cap_01",
     "violation_type"   : "high_liability_cap",
     "keywords"         : ["liability capped at contract value", "liable up to total fees", "liability equals fees"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 74",
     "description"      : "Liability capped at the full contract value",
     "explanation"      : "A cap equal to the full contract value still puts your entire fee at risk.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "hours_excessive_01",
     "violation_type"   : "excessive_hours",
     "keywords"         : ["available 24/7", "always available", "respond within 1 hour", "on-call at all times"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 73",
     "description"      : "Round-the-clock availability demands",
     "explanation"      : "Being on call at all hours is unreasonable for a contractor and blurs the line with employment.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # LOW
    {"pattern_id"       : "payment_45_59_01",
     "violation_type"   : "slight_payment_delay",
     "keywords"         : ["payment within 45 days", "net 45", "forty-five days"],
     "risk_level"       : "LOW",
     "risk_score"       : 8,
     "section"          : "Section 73",
     "description"      : "Payment terms of 45 to 59 days",
     "explanation"      : "Net 45 is a little slower than the Net 30 standard but usually acceptable.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "vague_scope_01",
     "violation_type"   : "vague_scope",
     "keywords"         : ["deliverables to be determined", "scope tbd", "as mutually agreed later"],
     "risk_level"       : "LOW",
     "risk_score"       : 8,
     "section"          : "Section 10",
     "description"      : "Deliverables left undefined",
     "explanation"      : "Undefined deliverables make it hard to prove the work is complete and to get paid.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "vague_deliverables_01",
     "violation_type"   : "vague_scope",
     "keywords"         : ["reasonable efforts", "best efforts", "as needed", "from time to time"],
     "risk_level"       : "LOW",
     "risk_score"       : 5,
     "section"          : "Section 10",
     "description"      : "Vague effort standards instead of concrete deliverables",
     "explanation"      : "Vague effort standards leave room for disputes about what was promised.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "nda_5_year_01",
     "violation_type"   : "long_confidentiality",
     "keywords"         : ["confidential for 5 years", "five year confidentiality", "10 year nda"],
     "risk_level"       : "LOW",
     "risk_score"       : 8,
     "section"          : "Section 27",
     "description"      : "Confidentiality period of five years or more",
     "explanation"      : "Confidentiality of five years or longer is above the usual two to three years.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "termination_short_01",
     "violation_type"   : "short_notice",
     "keywords"         : ["7 days notice", "one week notice", "3 day notice"],
     "risk_level"       : "LOW",
     "risk_score"       : 8,
     "section"          : "Section 73",
     "description"      : "Very short termination notice",
     "explanation"      : "A notice period of a week or less gives you little time to find replacement work.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },

    # POSITIVE (reduce the overall score)
    {"pattern_id"       : "positive_advance_01",
     "violation_type"   : "fair_payment_advance",
     "keywords"         : ["advance payment", "upfront payment", "50% advance", "payment before start"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -8,
     "section"          : "Section 73",
     "description"      : "Advance or upfront payment",
     "explanation"      : "An advance payment protects you against non-payment. This is a fair term.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "positive_net30_01",
     "violation_type"   : "fair_payment_terms",
     "keywords"         : ["payment within 30 days", "net 30", "thirty days of invoice"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -5,
     "section"          : "Section 73",
     "description"      : "Payment within 30 days",
     "explanation"      : "Net 30 payment is the fair industry standard.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "positive_mutual_term_01",
     "violation_type"   : "fair_termination",
     "keywords"         : ["either party may terminate", "mutual termination", "both parties have right"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -5,
     "section"          : "Section 73",
     "description"      : "Mutual termination rights",
     "explanation"      : "Both sides can end the contract on equal terms. This is balanced.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "positive_liability_cap_01",
     "violation_type"   : "fair_liability",
     "keywords"         : ["liability limited to fees paid", "cap at fees received", "limited to amount paid"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -5,
     "section"          : "Section 74",
     "description"      : "Liability capped at fees paid",
     "explanation"      : "Capping liability at the fees paid keeps your exposure proportionate.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "positive_indian_jurisdiction_01",
     "violation_type"   : "fair_jurisdiction",
     "keywords"         : ["governed by indian law", "jurisdiction of indian courts", "courts of india"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -3,
     "section"          : "Section 23",
     "description"      : "Indian law and courts govern disputes",
     "explanation"      : "Disputes will be heard in India under Indian law, which is practical and affordable for you.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
    {"pattern_id"       : "positive_portfolio_01",
     "violation_type"   : "fair_ip",
     "keywords"         : ["retain portfolio rights", "may showcase work", "display in portfolio"],
     "risk_level"       : "POSITIVE",
     "risk_score"       : -5,
     "section"          : "Section 27",
     "description"      : "Portfolio rights retained",
     "explanation"      : "You keep the right to show this work to future clients.",
     "context_required" : ALL,
     "industry_tags"    : ALL,
    },
]


# Minimal set used when the store holds no patterns
FALLBACK_PATTERNS = [
    {"pattern_id"       : "s27_non_compete_fallback",
     "violation_type"   : "non_compete_section27",
     "keywords"         : ["non-compete", "non compete", "shall not compete", "restraint of trade", "not engage in similar", "cannot work for competitor"],
     "regex"            : r"(shall|will|agree)\s+(not|to not)\s+compete",
     "risk_level"       : "CRITICAL",
     "risk_score"       : 40,
     "section"          : "Section 27",
     "description"      : "Non-compete or restraint of trade clause",
     "explanation"      : "Non-compete clauses are void in India under Section 27 of the Indian Contract Act.",
    },
    {"pattern_id"       : "s73_liability_fallback",
     "violation_type"   : "unlimited_liability_section73",
     "keywords"         : ["unlimited liability", "all damages", "consequential damages", "indirect damages", "liable for all losses", "without limitation"],
     "risk_level"       : "HIGH",
     "risk_score"       : 25,
     "section"          : "Section 73",
     "description"      : "Unlimited or consequential damages liability",
     "explanation"      : "Compensation for breach is limited to losses that naturally arise from it. Remote and indirect losses are excluded under Section 73.",
    },
    {"pattern_id"       : "s74_penalty_fallback",
     "violation_type"   : "excessive_penalty_section74",
     "keywords"         : ["penalty of", "liquidated damages", "shall pay", "penalty equal to", "forfeit", "breach penalty"],
     "regex"            : r"penalty\s+(of|equal to)\s+[₹$]?\s*\d+",
     "risk_level"       : "HIGH",
     "risk_score"       : 20,
     "section"          : "Section 74",
     "description"      : "Penalty stipulated for breach",
     "explanation"      : "Only reasonable compensation up to the stipulated amount can be recovered under Section 74.",
    },
    {"pattern_id"       : "s10_termination_fallback",
     "violation_type"   : "unilateral_termination",
     "keywords"         : ["terminate at will", "without cause", "immediate termination", "terminate without notice", "at sole discretion", "cancel anytime"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 15,
     "section"          : "Section 10",
     "description"      : "One-sided termination right",
     "explanation"      : "A one-sided right to terminate at will undermines the mutuality a valid contract needs.",
    },
    {"pattern_id"       : "s10_jurisdiction_fallback",
     "violation_type"   : "foreign_jurisdiction",
     "keywords"         : ["governed by laws of", "jurisdiction of", "courts of usa", "uk jurisdiction", "singapore courts", "delaware", "california law"],
     "risk_level"       : "MEDIUM",
     "risk_score"       : 12,
     "section"          : "Section 10",
     "description"      : "Foreign governing law or jurisdiction",
     "explanation"      : "Foreign jurisdiction makes disputes expensive and impractical to pursue from India.",
    },
]
