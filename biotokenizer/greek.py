import re
from types import MappingProxyType


class GreekNormalizer:
    """
    Rewrites Greek letter names embedded in a lowercase sub-token,
    e.g. "il-1beta" -> "il-1b".

    Only a whole run of lowercase letters is looked up, so "alphabeta"
    stays as it is while "alpha2" becomes "a2".
    """

    LETTERS = MappingProxyType(
        {
            "alpha": "a",
            "beta": "b",
            "gamma": "g",
            "delta": "d",
            "epsilon": "e",
            "zeta": "z",
            "eta": "e",
            "theta": "th",
            "iota": "i",
            "kappa": "k",
            "lambda": "l",
            "mu": "m",
            "nu": "n",
            "xi": "x",
            "omicron": "o",
            "pi": "p",
            "rho": "r",
            "sigma": "s",
            "tau": "t",
            "upsilon": "u",
            "phi": "ph",
            "chi": "ch",
            "psi": "ps",
            "omega": "o",
        }
    )

    LETTER_RUN_REGEX = re.compile(r"[a-z]+")

    def normalize(self, subtoken: str) -> str:
        return self.LETTER_RUN_REGEX.sub(self._replace, subtoken)

    def _replace(self, match):
        run = match.group(0)
        return self.LETTERS.get(run, run)
