import logging
import re
from typing import Generator, Iterable, Optional

from .tokenize import Tokenizer

logger = logging.getLogger(__name__)


class DocumentFilter:
    """
    Normalizes the text of a Lemur/Indri style document stream.

    Markup lines (<DOC>, <DOCNO>..., <TITLE>, <TEXT> and their closing tags)
    are copied unchanged, every other line is tokenized.
    """

    MARKUP_REGEX = re.compile(r"^(<DOCNO|<DOC>|</DOC>|<TITLE|</TITLE>|<TEXT|</TEXT>)")

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self._tokenizer = tokenizer or Tokenizer()
        self.documents = 0
        self.content_lines = 0
        self.markup_lines = 0

    def is_markup(self, line: str) -> bool:
        return bool(self.MARKUP_REGEX.match(line))

    def process(self, lines: Iterable[str]) -> Generator[str, None, None]:
        for line in lines:
            if self.is_markup(line):
                self.markup_lines += 1
                if line.startswith("<DOC>"):
                    self.documents += 1

                yield line
                continue

            if line.endswith("\n"):
                line = line[:-1]

            self.content_lines += 1
            yield self._tokenizer.tokenize_line(line) + "\n"

        logger.info(
            "Processed %d documents: %d content lines, %d markup lines",
            self.documents,
            self.content_lines,
            self.markup_lines,
        )
