# DEPENDENCIES
import re
from typing import List
from typing import Tuple
from typing import Optional


SENTENCE_BOUNDARIES = ".!?\n"


class TextProcessor:
    """
    Text helpers shared by the segmenter, deviation checker and report builder
    """
    @staticmethod
    def contains_any(text: str, phrases: List[str]) -> bool:
        return any(phrase in text for phrase in phrases)


    @staticmethod
    def has_phrases_in_context(text: str, first_phrases: List[str], second_phrases: List[str], window: int) -> bool:
        """
        True when some phrase of each list occurs within `window` characters of the other

        Only the first occurrence of every phrase is considered
        """
        for first in first_phrases:
            first_index = text.find(first)

            if (first_index == -1):
                continue

            for second in second_phrases:
                second_index = text.find(second)

                if (second_index != -1) and (abs(first_index - second_index) <= window):
                    return True

        return False


    @staticmethod
    def extract_matched_text(text: str, phrase: str, context_chars: int = 200) -> Optional[str]:
        """
        Sentence around the first occurrence of `phrase`

        Arguments:
        ----------
            text          { str } : Source text

            phrase        { str } : Lower-case phrase to locate (case-insensitive)

            context_chars { int } : Maximum extension on each side before cutting the sentence short

        Returns:
        --------
                          { str } : Stripped excerpt, or None when the phrase is absent
        """
        index = text.lower().find(phrase.lower())

        if (index == -1):
            return None

        start       = index
        start_limit = max(0, index - context_chars)

        while (start > start_limit) and (text[start - 1] not in SENTENCE_BOUNDARIES):
            start -= 1

        end       = index + len(phrase)
        end_limit = min(len(text), end + context_chars)

        while (end < end_limit) and (text[end] not in SENTENCE_BOUNDARIES):
            end += 1

        if (end < len(text)) and (text[end] in ".!?"):
            end += 1

        return text[start:end].strip()


    @staticmethod
    def find_clause_offsets(source: str, clause_text: str, position: Optional[int] = None) -> Tuple[int, int]:
        """
        Character span of a clause inside the source, for highlighting

        Tries the recorded position, then a case-insensitive search for the whole clause, then for its first 50
        characters, and finally keeps the recorded position as an estimate. The span is clamped to the source
        """
        length = len(clause_text)

        if (position is not None) and (source[position:position + length] == clause_text):
            return position, position + length

        lowered_source = source.lower()
        lowered_clause = clause_text.lower()
        start          = lowered_source.find(lowered_clause)

        if (start == -1) and lowered_clause:
            start = lowered_source.find(lowered_clause[:50])

        if (start == -1):
            start = position or 0

        start = max(0, min(start, len(source)))
        end   = max(start, min(start + length, len(source)))

        return start, end


    @staticmethod
    def first_int(patterns: List[str], text: str) -> Optional[int]:
        """
        First capture group of the first pattern that matches, as an int
        """
        for pattern in patterns:
            match = re.search(pattern, text)

            if match:
                return int(match.group(1))

        return None
