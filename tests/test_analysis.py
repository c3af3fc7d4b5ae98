import pickle

import pytest
from whoosh.fields import ID, TEXT, Schema
from whoosh.index import create_in, open_dir
from whoosh.query import Term

from biotokenizer import TokenizerConfig
from biotokenizer.analysis import BioAnalyzer


@pytest.fixture
def documents():
    return {
        "PMID-0001": "TNF-alpha induces apoptosis",
        "PMID-0002": "IL-6 (interleukin-6) signalling",
        "PMID-0003": "TNFalpha and IL-1beta levels",
    }


def test_analyzer_terms():
    analyzer = BioAnalyzer()

    assert [t.text for t in analyzer("Cell-cycles in T-cells")] == [
        "cell",
        "cycl",
        "in",
        "t",
        "cell",
    ]


def test_analyzer_positions():
    analyzer = BioAnalyzer(TokenizerConfig.symbolic())

    tokens = [(t.text, t.pos) for t in analyzer("TNF-alpha\nIL-6 levels", positions=True)]
    assert tokens == [("tnfa", 0), ("il6", 1), ("levels", 2)]


def test_analyzer_without_tokenizing():
    analyzer = BioAnalyzer()
    assert [t.text for t in analyzer("TNF-alpha", tokenize=False)] == ["TNF-alpha"]


def test_analyzer_rejects_chars():
    analyzer = BioAnalyzer()

    with pytest.raises(ValueError, match="character offsets"):
        list(analyzer("TNF-alpha", chars=True))


def test_analyzer_pickle():
    analyzer = BioAnalyzer(TokenizerConfig.symbolic())
    restored = pickle.loads(pickle.dumps(analyzer))

    assert restored == analyzer
    assert [t.text for t in restored("IL-1beta")] == ["il1b"]


def test_whoosh_index(tmp_path, documents):
    schema = Schema(
        docno=ID(stored=True),
        content=TEXT(analyzer=BioAnalyzer(TokenizerConfig.symbolic()), stored=True),
    )

    ix = create_in(str(tmp_path), schema)
    writer = ix.writer()
    for docno, content in documents.items():
        writer.add_document(docno=docno, content=content)
    writer.commit()

    with open_dir(str(tmp_path)).searcher() as searcher:
        results = searcher.search(Term("content", "tnfa"))
        assert sorted(r["docno"] for r in results) == ["PMID-0001"]

        results = searcher.search(Term("content", "il6"))
        assert [r["docno"] for r in results] == ["PMID-0002"]

        results = searcher.search(Term("content", "il1b"))
        assert [r["docno"] for r in results] == ["PMID-0003"]
