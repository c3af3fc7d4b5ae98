from typing import Optional

from whoosh.analysis import Token
from whoosh.analysis import Tokenizer as WhooshTokenizer

from .config import TokenizerConfig
from .tokenize import Tokenizer


class BioTokenizer(WhooshTokenizer):
    """
    whoosh tokenizer running the biomedical pipeline line by line.

    Character offsets are not tracked (cleanup rewrites the line), asking
    for chars raises ValueError.
    """

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self.config = config or TokenizerConfig.default()
        self._tokenizer = Tokenizer(self.config)

    # the schema is pickled into the index, only the config needs to travel
    def __getstate__(self):
        return {"config": self.config}

    def __setstate__(self, state):
        self.__init__(state["config"])

    def __eq__(self, other):
        return self.__class__ is other.__class__ and self.config == other.config

    def __hash__(self):
        return hash(self.config)

    def __call__(
        self,
        value,
        positions=False,
        chars=False,
        keeporiginal=False,
        removestops=True,
        start_pos=0,
        start_char=0,
        tokenize=True,
        mode="",
        **kwargs,
    ):
        if chars:
            raise ValueError(
                "BioTokenizer does not track character offsets, "
                "use a field without chars=True"
            )

        t = Token(positions, chars, removestops=removestops, mode=mode, **kwargs)

        if not tokenize:
            t.original = t.text = value
            t.boost = 1.0
            if positions:
                t.pos = start_pos
            yield t
            return

        pos = start_pos
        for line in value.splitlines():
            for term in self._tokenizer.terms(line):
                t.text = term
                t.boost = 1.0
                if keeporiginal:
                    t.original = term
                t.stopped = False
                if positions:
                    t.pos = pos
                    pos += 1
                yield t


def BioAnalyzer(config: Optional[TokenizerConfig] = None) -> BioTokenizer:
    """Analyzer for whoosh fields, e.g. TEXT(analyzer=BioAnalyzer())."""
    return BioTokenizer(config)
