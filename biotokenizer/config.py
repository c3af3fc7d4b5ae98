# biotokenizer/config.py
from dataclasses import dataclass
from enum import Enum, IntEnum
from os import getenv
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .errors import (
    BreakPointError,
    NormalizationError,
    QueryTypeError,
    StemmerError,
)

# --- Environment ---

# A .env in the working directory may override the logging defaults
load_dotenv(find_dotenv(usecwd=True))

LOG_LEVEL = getenv("BIOTOKENIZER_LOG_LEVEL", "WARNING").upper()
LOG_FILE = getenv("BIOTOKENIZER_LOG_FILE") or None


# --- Strategy enums ---


class BreakPoint(IntEnum):
    NONE = 0
    DELIMITER = 1
    ALNUM = 2
    WORD_CLASS = 3


class RecombineMode(str, Enum):
    HYPHEN = "h"
    SPACE = "s"
    # "j" joins sub-tokens without a separator and re-stems the result
    CONCAT = "j"


class Stemming(str, Enum):
    NONE = ""
    PORTER = "p"
    LOVINS = "l"
    S = "s"


class QueryType(str, Enum):
    SYMBOLIC = "S"
    VERBOSE = "V"


@dataclass(frozen=True)
class TokenizerConfig:
    break_point: BreakPoint = BreakPoint.DELIMITER
    mode: Optional[RecombineMode] = RecombineMode.SPACE
    greek: bool = False
    stemmer: Stemming = Stemming.PORTER

    def __post_init__(self):
        # plain codes ("s", 1, "p") become their enum members
        object.__setattr__(self, "break_point", BreakPoint(self.break_point))
        if self.mode is not None:
            object.__setattr__(self, "mode", RecombineMode(self.mode))
        object.__setattr__(self, "stemmer", Stemming(self.stemmer))

    @classmethod
    def symbolic(cls) -> "TokenizerConfig":
        """Gene/protein symbol queries, e.g. "TNF-alpha"."""
        return cls(BreakPoint.DELIMITER, RecombineMode.CONCAT, True, Stemming.NONE)

    @classmethod
    def verbose(cls) -> "TokenizerConfig":
        """Full gene names mixed with ordinary English."""
        return cls(BreakPoint.DELIMITER, RecombineMode.SPACE, False, Stemming.PORTER)

    @classmethod
    def default(cls) -> "TokenizerConfig":
        return cls.verbose()

    @classmethod
    def from_options(
        cls,
        query_type: Union[QueryType, str, None] = None,
        break_point: Union[BreakPoint, int, str, None] = None,
        normalization: Union[RecombineMode, str, None] = None,
        greek: bool = False,
        stemmer: Union[Stemming, str, None] = None,
    ) -> "TokenizerConfig":
        """
        Resolve command-line style options into a config.

        A query type selects its preset and wins over everything else;
        without one, the remaining options only apply when a break point
        is given, otherwise the default policy is used.

        Raises:
            QueryTypeError: unknown query type
            BreakPointError: break point outside 0..3
            NormalizationError: normalization missing or unknown
            StemmerError: unknown stemming method
        """
        if query_type is not None:
            query_type = _coerce(
                QueryType,
                query_type,
                QueryTypeError("The query type must be S(Symbolic) or V(Verbose)!"),
            )
            if query_type is QueryType.SYMBOLIC:
                return cls.symbolic()
            return cls.verbose()

        if break_point is None:
            return cls.default()

        break_point = _parse_break_point(break_point)
        if break_point is BreakPoint.NONE:
            return cls(break_point, None, False, Stemming.NONE)

        if normalization is None:
            raise NormalizationError(
                "If the break point set is not 0, "
                "a normalization method must be specified!"
            )

        mode = _coerce(
            RecombineMode,
            normalization,
            NormalizationError("The normalization method must be 'h', 's' or 'j'!"),
        )

        if stemmer is None:
            stemmer = Stemming.NONE
        else:
            stemmer_error = StemmerError("The stemming method must be 'p', 'l' or 's'!")
            stemmer = _coerce(Stemming, stemmer, stemmer_error)
            # an empty method is not a way of asking for no stemming
            if stemmer is Stemming.NONE:
                raise stemmer_error

        return cls(break_point, mode, bool(greek), stemmer)


def _coerce(enum, value, error):
    if isinstance(value, enum):
        return value

    try:
        return enum(value)
    except ValueError:
        raise error from None


def _parse_break_point(value) -> BreakPoint:
    if isinstance(value, BreakPoint):
        return value

    codes = {str(bp.value): bp for bp in BreakPoint}
    if isinstance(value, bool) or str(value) not in codes:
        raise BreakPointError("The break point set must be 0, 1, 2 or 3!")

    return codes[str(value)]
