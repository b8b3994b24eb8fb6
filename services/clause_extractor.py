# DEPENDENCIES
import re
import sys
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from services.data_models import Clause
from utils.logger import RiskEngineLogger
from services.data_models import SegmentationError


Span = Tuple[int, int]


class ClauseSegmenter:
    """
    Split raw contract text into ordered, non-overlapping clauses

    Every clause is an exact slice of the source, so `text[clause.position:clause.end] == clause.text` always holds
    """
    BLOCK_SEPARATOR  = re.compile(r'\n[ \t]*\n\s*')

    # Line-leading markers that start a new clause inside a block
    NUMBERING        = re.compile(r'^[ \t]*(?:\d+(?:\.\d+)+\.?\s'          # 1.1 / 2.3.4
                                  r'|\d+[.)]\s'                            # 1. / 2)
                                  r'|\((?:[a-z]|[ivxlcdm]+)\)\s'           # (a) / (iv)
                                  r'|(?:section|article|clause)\s+(?:\d+|[ivxlcdm]+)\b)',
                                  re.IGNORECASE | re.MULTILINE,
                                 )

    SENTENCE_END     = re.compile(r'(?<=[.!?])\s+')
    TERMINATORS      = ".!?;:"


    def __init__(self, max_clause_length: Optional[int] = None, min_heading_length: Optional[int] = None):
        """
        Arguments:
        ----------
            max_clause_length  { int } : Blocks longer than this are split on sentence boundaries (default: MAX_CLAUSE_LENGTH)

            min_heading_length { int } : Unterminated fragments shorter than this are merged into the next clause (default: MIN_HEADING_LENGTH)
        """
        self.max_clause_length  = max_clause_length or settings.MAX_CLAUSE_LENGTH
        self.min_heading_length = min_heading_length or settings.MIN_HEADING_LENGTH


    @RiskEngineLogger.log_execution_time("segment_clauses")
    def segment(self, text: str) -> List[Clause]:
        """
        Segment contract text

        Arguments:
        ----------
            text { str } : Raw extracted contract text

        Returns:
        --------
                 { list } : Clauses with 1-based ids in contract order

        Raises:
        -------
            SegmentationError : Text is empty or whitespace only
        """
        if (not text) or (not text.strip()):
            raise SegmentationError("Cannot segment empty contract text")

        spans = list()

        for block in self._blocks(text):
            for numbered in self._split_numbering(text, block):
                trimmed = self._trim(text, numbered)

                if trimmed:
                    spans.extend(self._split_long(text, trimmed))

        spans   = self._merge_headings(text, spans)
        clauses = [Clause(id = index + 1, text = text[start:end], position = start) for index, (start, end) in enumerate(spans)]

        log_info("Contract segmented", characters = len(text), clauses = len(clauses))

        return clauses


    def _blocks(self, text: str) -> List[Span]:
        blocks = list()
        start  = 0

        for separator in self.BLOCK_SEPARATOR.finditer(text):
            blocks.append((start, separator.start()))
            start = separator.end()

        blocks.append((start, len(text)))

        return blocks


    def _split_numbering(self, text: str, block: Span) -> List[Span]:
        start, end = block
        cuts       = [match.start() + start for match in self.NUMBERING.finditer(text[start:end]) if match.start() > 0]

        if not cuts:
            return [block]

        bounds = [start] + cuts + [end]

        return [(bounds[i], bounds[i + 1]) for i in range(len(bounds) - 1)]


    @staticmethod
    def _trim(text: str, span: Span) -> Optional[Span]:
        start, end = span

        while (start < end) and text[start].isspace():
            start += 1

        while (end > start) and text[end - 1].isspace():
            end -= 1

        return (start, end) if (start < end) else None


    def _split_long(self, text: str, span: Span) -> List[Span]:
        start, end = span

        if ((end - start) <= self.max_clause_length):
            return [span]

        # Sentence spans inside the block
        sentences = list()
        cursor    = start

        for boundary in self.SENTENCE_END.finditer(text, start, end):
            sentences.append((cursor, boundary.start()))
            cursor = boundary.end()

        if (cursor < end):
            sentences.append((cursor, end))

        # Greedy packing up to the maximum length; a single long sentence stays whole
        pieces        = list()
        current_start = None
        current_end   = None

        for sentence_start, sentence_end in sentences:
            if current_start is None:
                current_start, current_end = sentence_start, sentence_end

            elif ((sentence_end - current_start) <= self.max_clause_length):
                current_end = sentence_end

            else:
                pieces.append((current_start, current_end))
                current_start, current_end = sentence_start, sentence_end

        if current_start is not None:
            pieces.append((current_start, current_end))

        return pieces


    def _is_heading(self, text: str, span: Span) -> bool:
        start, end = span
        fragment   = text[start:end]

        return (len(fragment) < self.min_heading_length) and (fragment[-1] not in self.TERMINATORS)


    def _merge_headings(self, text: str, spans: List[Span]) -> List[Span]:
        merged        = list()
        pending_start = None

        for span in spans:
            start, end = span

            if pending_start is not None:
                start         = pending_start
                pending_start = None

            if self._is_heading(text, span):
                pending_start = start
                continue

            merged.append((start, end))

        # Trailing heading with nothing after it
        if pending_start is not None:
            merged.append((pending_start, spans[-1][1]))

        return merged
