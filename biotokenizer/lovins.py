import re
from functools import lru_cache


class LovinsStemmer:
    """
    Lovins stemmer (Lovins 1968), after Gordon W. Paynter's Perl version 1.1.

    Phase 1 removes the longest ending from ENDINGS whose condition holds
    for the remaining stem, phase 2 recodes the end of the stem.
    """

    # The longest ending is 11 characters long
    MAX_ENDING = 11
    MIN_STEM = 2

    ENDINGS = {
        "a": "A",

        "ae": "A",
        "al": "BB",
        "ar": "X",
        "as": "B",

        "acy": "A",
        "age": "B",
        "aic": "A",
        "als": "BB",
        "ant": "B",
        "ars": "O",
        "ary": "F",
        "ata": "A",
        "ate": "A",

        "able": "A",
        "ably": "A",
        "ages": "B",
        "ally": "B",
        "ance": "B",
        "ancy": "B",
        "ants": "B",
        "aric": "A",
        "arly": "K",
        "ated": "I",
        "ates": "A",
        "atic": "B",
        "ator": "A",

        "acies": "A",
        "acity": "A",
        "aging": "B",
        "aical": "A",
        "alist": "A",
        "alism": "B",
        "ality": "A",
        "alize": "A",
        "allic": "BB",
        "anced": "B",
        "ances": "B",
        "antic": "C",
        "arial": "A",
        "aries": "A",
        "arily": "A",
        "arity": "B",
        "arize": "A",
        "aroid": "A",
        "ately": "A",
        "ating": "I",
        "ation": "B",
        "ative": "A",
        "ators": "A",
        "atory": "A",
        "ature": "E",

        "aceous": "A",
        "acious": "B",
        "action": "G",
        "alness": "A",
        "ancial": "A",
        "ancies": "A",
        "ancing": "B",
        "ariser": "A",
        "arized": "A",
        "arizer": "A",
        "atable": "A",
        "ations": "B",
        "atives": "A",

        "ability": "A",
        "aically": "A",
        "alistic": "B",
        "alities": "A",
        "ariness": "E",
        "aristic": "A",
        "arizing": "A",
        "ateness": "A",
        "atingly": "A",
        "ational": "B",
        "atively": "A",
        "ativism": "A",

        "ableness": "A",
        "arizable": "A",

        "allically": "C",
        "antaneous": "A",
        "antiality": "A",
        "arisation": "A",
        "arization": "A",
        "ationally": "B",
        "ativeness": "A",

        "antialness": "A",
        "arisations": "A",
        "arizations": "A",

        "alistically": "B",
        "arizability": "A",

        "e": "A",

        "ed": "E",
        "en": "F",
        "es": "E",

        "eal": "Y",
        "ear": "Y",
        "ely": "E",
        "ene": "E",
        "ent": "C",
        "ery": "E",
        "ese": "A",

        "ealy": "Y",
        "edly": "E",
        "eful": "A",
        "eity": "A",
        "ence": "A",
        "ency": "A",
        "ened": "E",
        "enly": "E",
        "eous": "A",

        "early": "Y",
        "ehood": "A",
        "eless": "A",
        "elily": "A",
        "ement": "A",
        "enced": "A",
        "ences": "A",
        "eness": "E",
        "ening": "E",
        "ental": "A",
        "ented": "C",
        "ently": "A",

        "eature": "Z",
        "efully": "A",
        "encies": "A",
        "encing": "A",
        "ential": "A",
        "enting": "C",
        "entist": "A",
        "eously": "A",

        "elihood": "E",
        "encible": "A",
        "entally": "A",
        "entials": "A",
        "entiate": "A",
        "entness": "A",

        "entation": "A",
        "entially": "A",
        "eousness": "A",

        "eableness": "E",
        "entations": "A",
        "entiality": "A",
        "entialize": "A",
        "entiation": "A",

        "entialness": "A",

        "ful": "A",

        "fully": "A",

        "fulness": "A",

        "hood": "A",

        "i": "A",

        "ia": "A",
        "ic": "A",
        "is": "A",

        "ial": "A",
        "ian": "A",
        "ics": "A",
        "ide": "L",
        "ied": "A",
        "ier": "A",
        "ies": "P",
        "ily": "A",
        "ine": "M",
        "ing": "N",
        "ion": "Q",
        "ish": "C",
        "ism": "B",
        "ist": "A",
        "ite": "AA",
        "ity": "A",
        "ium": "A",
        "ive": "A",
        "ize": "F",

        "ials": "A",
        "ians": "A",
        "ible": "A",
        "ibly": "A",
        "ical": "A",
        "ides": "L",
        "iers": "A",
        "iful": "A",
        "ines": "M",
        "ings": "N",
        "ions": "B",
        "ious": "A",
        "isms": "B",
        "ists": "A",
        "itic": "H",
        "ized": "F",
        "izer": "F",

        "ially": "A",
        "icant": "A",
        "ician": "A",
        "icide": "A",
        "icism": "A",
        "icist": "A",
        "icity": "A",
        "idine": "I",
        "iedly": "A",
        "ihood": "A",
        "inate": "A",
        "iness": "A",
        "ingly": "B",
        "inism": "J",
        "inity": "CC",
        "ional": "A",
        "ioned": "A",
        "ished": "A",
        "istic": "A",
        "ities": "A",
        "itous": "A",
        "ively": "A",
        "ivity": "A",
        "izers": "F",
        "izing": "F",

        "ialist": "A",
        "iality": "A",
        "ialize": "A",
        "ically": "A",
        "icance": "A",
        "icians": "A",
        "icists": "A",
        "ifully": "A",
        "ionals": "A",
        "ionate": "D",
        "ioning": "A",
        "ionist": "A",
        "iously": "A",
        "istics": "A",
        "izable": "E",

        "ibility": "A",
        "icalism": "A",
        "icalist": "A",
        "icality": "A",
        "icalize": "A",
        "ication": "G",
        "icianry": "A",
        "ination": "A",
        "ingness": "A",
        "ionally": "A",
        "isation": "A",
        "ishness": "A",
        "istical": "A",
        "iteness": "A",
        "iveness": "A",
        "ivistic": "A",
        "ivities": "A",
        "ization": "F",
        "izement": "A",

        "ibleness": "A",
        "icalness": "A",
        "ionalism": "A",
        "ionality": "A",
        "ionalize": "A",
        "iousness": "A",
        "izations": "A",

        "ionalness": "A",
        "istically": "A",
        "itousness": "A",
        "izability": "A",
        "izational": "A",

        "izationally": "B",

        "ly": "B",

        "less": "A",
        "lily": "A",

        "lessly": "A",

        "lessness": "A",

        "ness": "A",

        "nesses": "A",

        "o": "A",

        "on": "S",
        "or": "T",

        "oid": "A",
        "one": "R",
        "ous": "A",

        "ogen": "A",

        "oidal": "A",
        "oides": "A",
        "otide": "A",
        "ously": "A",

        "oidism": "A",

        "oidally": "A",
        "ousness": "A",

        "s": "W",

        "s'": "A",

        "um": "U",
        "us": "V",

        "ward": "A",
        "wise": "A",

        "y": "B",

        "yl": "R",

        "ying": "B",
        "yish": "A",

        "'s": "A",
    }

    CONDITIONS = {
        "A": lambda stem: True,
        "B": lambda stem: len(stem) >= 3,
        "W": lambda stem: not re.search(r"[su]$", stem),
        "E": lambda stem: not stem.endswith("e"),
        "N": lambda stem: bool(re.search(r"([^s]..|.s..)$", stem)),
        "F": lambda stem: len(stem) >= 3 and not stem.endswith("e"),
        "Q": lambda stem: len(stem) >= 3 and not re.search(r"[ln]$", stem),
        "C": lambda stem: len(stem) >= 4,
        "BB": lambda stem: len(stem) >= 3 and not re.search(r"(met|ryst)$", stem),
        "S": lambda stem: bool(re.search(r"(dr|[^t]t)$", stem)),
        "T": lambda stem: bool(re.search(r"(s|[^o]t)$", stem)),
        "X": lambda stem: bool(re.search(r"(l|i|u.e)$", stem)),
        "I": lambda stem: not re.search(r"[oe]$", stem),
        "P": lambda stem: not stem.endswith("c"),
        "M": lambda stem: not re.search(r"[aecm]$", stem),
        "L": lambda stem: not re.search(r"(u|x|[^o]s)$", stem),
        "O": lambda stem: bool(re.search(r"[li]$", stem)),
        "AA": lambda stem: bool(re.search(r"(d|f|ph|th|l|er|or|es|t)$", stem)),
        "V": lambda stem: stem.endswith("c"),
        "R": lambda stem: bool(re.search(r"[nr]$", stem)),
        "Y": lambda stem: stem.endswith("in"),
        "G": lambda stem: len(stem) >= 3 and stem.endswith("f"),
        "K": lambda stem: len(stem) >= 3 and bool(re.search(r"(l|i|u.e)$", stem)),
        "U": lambda stem: bool(re.search(r"[lmnr]$", stem)),
        "D": lambda stem: len(stem) >= 5,
        "H": lambda stem: bool(re.search(r"(t|ll)$", stem)),
        "J": lambda stem: not re.search(r"[ae]$", stem),
        "Z": lambda stem: not stem.endswith("f"),
        "CC": lambda stem: stem.endswith("l"),
    }

    # keyed by the last character of the stem, the first rule that matches wins
    RESPELLINGS = {
        "t": (
            (r"tt$", "t"),
            (r"uct$", "uc"),
            (r"umpt$", "um"),
            (r"rpt$", "rb"),
            (r"mit$", "mis"),
            (r"ert$", "ers"),
            (r"^et$", "es"),
            (r"([^n])et$", r"\1es"),
            (r"yt$", "ys"),
        ),
        "r": (
            (r"rr$", "r"),
            (r"istr$", "ister"),
            (r"metr$", "meter"),
            (r"^her$", "hes"),
            (r"([^pt])her$", r"\1hes"),
        ),
        "d": (
            (r"dd$", "d"),
            (r"uad$", "uas"),
            (r"vad$", "vas"),
            (r"cid$", "cis"),
            (r"lid$", "lis"),
            (r"erid$", "eris"),
            (r"pand$", "pans"),
            (r"^end$", "ens"),
            (r"([^sm])end$", r"\1ens"),
            (r"ond$", "ons"),
            (r"lud$", "lus"),
            (r"rud$", "rus"),
        ),
        "n": ((r"nn$", "n"),),
        "l": (
            (r"ll$", "l"),
            (r"([^aio])ul$", r"\1l"),
        ),
        "m": ((r"mm$", "m"),),
        "s": (
            (r"ss$", "s"),
            (r"urs$", "ur"),
        ),
        "g": ((r"gg$", "g"),),
        "v": (
            (r"iev$", "ief"),
            (r"olv$", "olut"),
        ),
        "p": ((r"pp$", "p"),),
        "b": ((r"bb$", "b"),),
        "x": (
            (r"bex$", "bic"),
            (r"dex$", "dic"),
            (r"pex$", "pic"),
            (r"tex$", "tic"),
            (r"ax$", "ac"),
            (r"ex$", "ec"),
            (r"ix$", "ic"),
            (r"lux$", "luc"),
        ),
        "z": ((r"yz$", "ys"),),
    }

    def __init__(self):
        self._respellings = {
            last: tuple((re.compile(pattern), repl) for pattern, repl in rules)
            for last, rules in self.__class__.RESPELLINGS.items()
        }

    @lru_cache(maxsize=4096)
    def stem(self, word: str) -> str:
        """
        Stem the word if it has more than two characters,
        otherwise return it as is.
        """

        if len(word) <= self.MIN_STEM:
            return word

        return self.recode(self.remove_ending(word))

    def remove_ending(self, word):
        start = max(self.MIN_STEM, len(word) - self.MAX_ENDING)

        # longest candidate ending first
        for i in range(start, len(word)):
            stem, ending = word[:i], word[i:]

            if (code := self.ENDINGS.get(ending)) and self.CONDITIONS[code](stem):
                return stem

        return word

    def recode(self, word):
        for pattern, repl in self._respellings.get(word[-1], ()):
            word, count = pattern.subn(repl, word, count=1)
            if count:
                break

        return word
