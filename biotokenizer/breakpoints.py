import re

from .config import BreakPoint


class BreakPointExtractor:
    """Splits a raw token into its sub-tokens under one break point policy."""

    # BP1: anything but brackets, "-", "_" and "/"
    DELIMITER_REGEX = re.compile(r"[^()\[\]\-_/]+")
    # BP2: ASCII letters and digits, everything else is dropped
    ALNUM_REGEX = re.compile(r"[A-Za-z0-9]+")
    # BP3: word classes, tried in this order at every position
    WORD_CLASS_REGEXES = (
        re.compile(r"[A-Z][a-z]+"),
        re.compile(r"[A-Z]+"),
        re.compile(r"[a-z]+"),
        re.compile(r"[0-9]+"),
    )

    def __init__(self, policy: BreakPoint = BreakPoint.DELIMITER):
        self.policy = BreakPoint(policy)

    def extract(self, token: str) -> list[str]:
        if self.policy is BreakPoint.NONE:
            return [token]
        elif self.policy is BreakPoint.DELIMITER:
            return self.DELIMITER_REGEX.findall(token)
        elif self.policy is BreakPoint.ALNUM:
            return self.ALNUM_REGEX.findall(token)

        return self.word_classes(token)

    def word_classes(self, token: str) -> list[str]:
        """
        Scan left to right; at each position the first word class that
        matches is taken greedily, characters no class matches are skipped.
        """
        subtokens = []

        pos = 0
        while pos < len(token):
            for regex in self.WORD_CLASS_REGEXES:
                if match := regex.match(token, pos):
                    subtokens.append(match.group(0))
                    pos = match.end()
                    break
            else:
                pos += 1

        return subtokens
