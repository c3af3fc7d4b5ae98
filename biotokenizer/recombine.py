from typing import Callable, Optional

from .config import BreakPoint, RecombineMode
from .errors import NormalizationError


class Recombiner:
    """
    Reassembles normalized sub-tokens into the emitted token.

    | break point | mode   | stem sub-tokens | join       | re-stem token |
    |-------------|--------|-----------------|------------|---------------|
    | NONE        | -      | no              | first only | yes           |
    | other       | HYPHEN | no              | "-"        | yes           |
    | other       | SPACE  | yes             | " "        | no            |
    | other       | CONCAT | no              | ""         | yes           |
    """

    SEPARATORS = {
        RecombineMode.HYPHEN: "-",
        RecombineMode.SPACE: " ",
        RecombineMode.CONCAT: "",
    }

    def __init__(
        self,
        policy: BreakPoint,
        mode: Optional[RecombineMode],
        stem: Optional[Callable[[str], str]] = None,
    ):
        self.policy = BreakPoint(policy)
        self.mode = RecombineMode(mode) if mode is not None else None
        self._stem = stem

        if self.policy is not BreakPoint.NONE and self.mode is None:
            raise NormalizationError(
                "If the break point set is not 0, "
                "a normalization method must be specified!"
            )

    def combine(self, subtokens: list[str]) -> str:
        if not subtokens:
            return ""

        if self.policy is BreakPoint.NONE:
            token = subtokens[0]
        elif self.mode is RecombineMode.SPACE:
            if self._stem is not None:
                subtokens = [self._stem(s) for s in subtokens]

            return " ".join(subtokens)
        else:
            token = self.SEPARATORS[self.mode].join(subtokens)

        if self._stem is not None:
            token = self._stem(token)

        return token
