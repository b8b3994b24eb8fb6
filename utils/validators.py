# DEPENDENCIES
from typing import Any
from typing import Dict
from config.settings import settings


class ContractValidator:
    """
    Input checks run before the analysis core sees any text
    """
    # Words that suggest the text is a contract (keyword: weight)
    STRONG_INDICATORS = {'agreement'             : 3,
                         'contract'              : 3,
                         'party'                 : 2,
                         'parties'               : 2,
                         'whereas'               : 5,
                         'hereinafter'           : 5,
                         'liability'             : 3,
                         'confidentiality'       : 3,
                         'termination'           : 3,
                         'governing law'         : 4,
                         'jurisdiction'          : 3,
                         'indemnity'             : 3,
                         'consideration'         : 4,
                         'payment'               : 2,
                         'intellectual property' : 4,
                         'shall'                 : 1,
                         'agrees to'             : 2,
                        }

    MIN_INDICATOR_SCORE = 5


    @staticmethod
    def validate_text(text: Any) -> str:
        """
        Reject input the segmenter cannot work with

        Arguments:
        ----------
            text { str } : Extracted contract text

        Returns:
        --------
               { str }   : The same text

        Raises:
        -------
            ValueError   : Not a string, or outside the configured length limits
        """
        if not isinstance(text, str):
            raise ValueError(f"Contract text must be a string, got {type(text).__name__}")

        stripped = text.strip()

        # Blank text is left to the segmenter, which raises SegmentationError
        if stripped and (len(stripped) < settings.MIN_CONTRACT_LENGTH):
            raise ValueError(f"Contract text too short: {len(stripped)} characters (minimum {settings.MIN_CONTRACT_LENGTH})")

        if (len(text) > settings.MAX_CONTRACT_LENGTH):
            raise ValueError(f"Contract text too long: {len(text)} characters (maximum {settings.MAX_CONTRACT_LENGTH})")

        return text


    @classmethod
    def indicator_score(cls, text: str) -> int:
        lowered = text.lower()

        return sum(weight for keyword, weight in cls.STRONG_INDICATORS.items() if keyword in lowered)


    @classmethod
    def get_validation_report(cls, text: str) -> Dict[str, Any]:
        """
        Soft signals about the input; never raises
        """
        score = cls.indicator_score(text) if isinstance(text, str) else 0

        return {"characters"          : len(text) if isinstance(text, str) else 0,
                "indicator_score"     : score,
                "looks_like_contract" : score >= cls.MIN_INDICATOR_SCORE,
               }
