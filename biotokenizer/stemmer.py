import re
from functools import lru_cache


class PorterStemmer:
    """
    Porter stemmer following Martin Porter's reference Perl implementation
    http://www.tartarus.org/~martin/PorterStemmer/perl.txt

    The consonant sequence may start with "y" ("[^aeiou][^aeiouy]*") and a
    vowel sequence may start with "y" but never continue with it
    ("[aeiouy][aeiou]*"). Outputs must stay identical to the reference, the
    rules are not meant to be improved.
    """

    CONSONANT_SEQ = "[^aeiou][^aeiouy]*"
    VOWEL_SEQ = "[aeiouy][aeiou]*"

    # [C]VC... is m>0
    MGR0_REGEX = re.compile(rf"^({CONSONANT_SEQ})?{VOWEL_SEQ}{CONSONANT_SEQ}")
    # [C]VC[V] is m=1
    MEQ1_REGEX = re.compile(
        rf"^({CONSONANT_SEQ})?{VOWEL_SEQ}{CONSONANT_SEQ}({VOWEL_SEQ})?$"
    )
    # [C]VCVC... is m>1
    MGR1_REGEX = re.compile(
        rf"^({CONSONANT_SEQ})?{VOWEL_SEQ}{CONSONANT_SEQ}{VOWEL_SEQ}{CONSONANT_SEQ}"
    )
    HAS_VOWEL_REGEX = re.compile(rf"^({CONSONANT_SEQ})?[aeiouy]")
    SHORT_SYLLABLE_REGEX = re.compile(rf"^{CONSONANT_SEQ}[aeiouy][^aeiouwxy]$")

    STEP_2_SUFFIX_MAP = {
        "ational": "ate",
        "tional": "tion",
        "enci": "ence",
        "anci": "ance",
        "izer": "ize",
        "bli": "ble",
        "alli": "al",
        "entli": "ent",
        "eli": "e",
        "ousli": "ous",
        "ization": "ize",
        "ation": "ate",
        "ator": "ate",
        "alism": "al",
        "iveness": "ive",
        "fulness": "ful",
        "ousness": "ous",
        "aliti": "al",
        "iviti": "ive",
        "biliti": "ble",
        "logi": "log",
    }

    STEP_2_SUFFIX_REGEX = re.compile(
        r"(ational|tional|enci|anci|izer|bli|alli|entli|eli|ousli|ization|ation|ator|alism|iveness|fulness|ousness|aliti|iviti|biliti|logi)$"
    )

    STEP_3_SUFFIX_MAP = {
        "icate": "ic",
        "ative": "",
        "alize": "al",
        "iciti": "ic",
        "ical": "ic",
        "ful": "",
        "ness": "",
    }

    STEP_3_SUFFIX_REGEX = re.compile(r"(icate|ative|alize|iciti|ical|ful|ness)$")

    STEP_4_SUFFIX_REGEX = re.compile(
        r"(al|ance|ence|er|ic|able|ible|ant|ement|ment|ent|ou|ism|ate|iti|ous|ive|ize)$"
    )

    STEP_4_ION_REGEX = re.compile(r"(s|t)(ion)$")

    @lru_cache(maxsize=4096)
    def stem(self, word: str) -> str:
        """
        Stem the word if it has at least three characters,
        otherwise return it as is.
        """

        if len(word) < 3:
            return word

        # an initial y is a consonant for the whole run
        leading_y = word[0] == "y"
        if leading_y:
            word = "Y" + word[1:]

        word = self.step_1a(word)
        word = self.step_1b(word)
        word = self.step_1c(word)
        word = self.step_2(word)
        word = self.step_3(word)
        word = self.step_4(word)
        word = self.step_5(word)

        if leading_y:
            word = word[0].lower() + word[1:]

        return word

    def step_1a(self, word):
        if match := re.search(r"(ss|i)es$", word):
            return word[: match.start()] + match.group(1)
        elif re.search(r"[^s]s$", word):
            return word[:-1]

        return word

    def step_1b(self, word):
        if word.endswith("eed"):
            if self.MGR0_REGEX.search(word[:-3]):
                return word[:-1]

        elif match := re.search(r"(ed|ing)$", word):
            stem = word[: match.start()]

            if self.HAS_VOWEL_REGEX.search(stem):
                if re.search(r"(at|bl|iz)$", stem):
                    return stem + "e"
                elif re.search(r"([^aeiouylsz])\1$", stem):
                    return stem[:-1]
                elif self.SHORT_SYLLABLE_REGEX.search(stem):
                    return stem + "e"

                return stem

        return word

    def step_1c(self, word):
        if word.endswith("y") and self.HAS_VOWEL_REGEX.search(word[:-1]):
            return word[:-1] + "i"

        return word

    def step_2(self, word):
        if match := self.STEP_2_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]

            if self.MGR0_REGEX.search(stem):
                return stem + self.STEP_2_SUFFIX_MAP[match.group(1)]

        return word

    def step_3(self, word):
        if match := self.STEP_3_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]

            if self.MGR0_REGEX.search(stem):
                return stem + self.STEP_3_SUFFIX_MAP[match.group(1)]

        return word

    def step_4(self, word):
        if match := self.STEP_4_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]

            if self.MGR1_REGEX.search(stem):
                return stem

        elif match := self.STEP_4_ION_REGEX.search(word):
            # keep the "s" / "t" in front of "ion"
            stem = word[: match.start()] + match.group(1)

            if self.MGR1_REGEX.search(stem):
                return stem

        return word

    def step_5(self, word):
        if word.endswith("e"):
            stem = word[:-1]

            if self.MGR1_REGEX.search(stem) or (
                self.MEQ1_REGEX.search(stem)
                and not self.SHORT_SYLLABLE_REGEX.search(stem)
            ):
                word = stem

        if word.endswith("ll") and self.MGR1_REGEX.search(word):
            word = word[:-1]

        return word


class SStemmer:
    """Plural stripping: "ies" -> "y", "es" -> "e", "s" -> ""."""

    @lru_cache(maxsize=4096)
    def stem(self, word: str) -> str:
        if word.endswith("ies"):
            if word == "ies":
                return "y"
            if word[-4] not in "ae":
                return word[:-3] + "y"

        elif word.endswith("es"):
            if word == "es":
                return "e"
            if word[-3] not in "aeo":
                return word[:-2] + "e"

        elif re.search(r"[^us]s$", word):
            return word[:-1]

        return word
