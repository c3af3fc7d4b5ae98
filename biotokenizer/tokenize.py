import logging
import re
from typing import Generator, Optional

from line_profiler import profile

from .breakpoints import BreakPointExtractor
from .config import Stemming, TokenizerConfig
from .greek import GreekNormalizer
from .lovins import LovinsStemmer
from .recombine import Recombiner
from .stemmer import PorterStemmer, SStemmer

logger = logging.getLogger(__name__)


STEMMERS = {
    Stemming.PORTER: PorterStemmer,
    Stemming.LOVINS: LovinsStemmer,
    Stemming.S: SStemmer,
}


class Tokenizer:

    # Removal of non-functional characters, applied in order to " " + line + " "
    CLEANUP_RULES = (
        # 1. symbols that never carry meaning
        (re.compile(r"[!\"#$%&*<=>?@\\|~]"), " "),
        # 2. sentence punctuation before a space
        (re.compile(r"[.:;,] "), " "),
        # 3. one level of parentheses / brackets around a word, twice for nesting
        (re.compile(r" \(([^)]*)\) "), r" \1 "),
        (re.compile(r" \[([^)]*)\] "), r" \1 "),
        (re.compile(r" \(([^)]*)\) "), r" \1 "),
        (re.compile(r" \[([^)]*)\] "), r" \1 "),
        # 4. opening quote, closing backtick
        (re.compile(r" '"), " "),
        (re.compile(r"` "), " "),
        # 5. 's and 't endings
        (re.compile(r"'[st] "), " "),
        # 2 again, for punctuation that stood before a bracket
        (re.compile(r"[.:;,] "), " "),
        # 6. trailing slashes
        (re.compile(r"/+ "), " "),
    )

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self.config = config or TokenizerConfig.default()

        stemmer = None
        if self.config.stemmer is not Stemming.NONE:
            stemmer = STEMMERS[self.config.stemmer]().stem

        self._extractor = BreakPointExtractor(self.config.break_point)
        self._greek = GreekNormalizer() if self.config.greek else None
        self._recombiner = Recombiner(
            self.config.break_point, self.config.mode, stemmer
        )

        logger.debug(
            "Tokenizer initialized: break_point=%s mode=%s greek=%s stemmer=%s",
            self.config.break_point.name,
            self.config.mode.name if self.config.mode is not None else None,
            self.config.greek,
            self.config.stemmer.name,
        )

    def clean(self, line: str) -> str:
        line = f" {line} "
        for regex, repl in self.__class__.CLEANUP_RULES:
            line = regex.sub(repl, line)

        return line

    def split(self, line: str) -> list[str]:
        """Raw whitespace-delimited tokens of a cleaned line."""
        return self.clean(line).split()

    def normalize(self, token: str) -> str:
        subtokens = [s.lower() for s in self._extractor.extract(token)]

        # Greek letters are normalized per sub-token, before recombination
        if self._greek is not None:
            subtokens = [self._greek.normalize(s) for s in subtokens]

        return self._recombiner.combine(subtokens)

    def tokenize(self, line: str) -> Generator[str, None, None]:
        for token in self.split(line):
            if normalized := self.normalize(token):
                yield normalized

    @profile
    def tokenize_line(self, line: str) -> str:
        return " ".join(self.tokenize(line))

    def terms(self, line: str) -> Generator[str, None, None]:
        """Index terms; a SPACE-mode token contributes one term per sub-token."""
        for token in self.tokenize(line):
            yield from token.split(" ")
