import dataclasses

import pytest
from biotokenizer import (
    BreakPoint,
    BreakPointError,
    ConfigError,
    NormalizationError,
    QueryType,
    QueryTypeError,
    RecombineMode,
    StemmerError,
    Stemming,
    TokenizerConfig,
)


def test_presets():
    assert TokenizerConfig.symbolic() == TokenizerConfig(
        BreakPoint.DELIMITER, RecombineMode.CONCAT, True, Stemming.NONE
    )
    assert TokenizerConfig.verbose() == TokenizerConfig(
        BreakPoint.DELIMITER, RecombineMode.SPACE, False, Stemming.PORTER
    )
    assert TokenizerConfig.default() == TokenizerConfig.verbose() == TokenizerConfig()


def test_config_is_frozen():
    config = TokenizerConfig.default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.greek = True


def test_from_options_defaults():
    assert TokenizerConfig.from_options() == TokenizerConfig.default()
    # without a break point the other options are not looked at
    assert TokenizerConfig.from_options(normalization="x", stemmer="k", greek=True) == (
        TokenizerConfig.default()
    )


@pytest.mark.parametrize(
    "query_type, config",
    [
        ("S", TokenizerConfig.symbolic()),
        ("V", TokenizerConfig.verbose()),
        (QueryType.SYMBOLIC, TokenizerConfig.symbolic()),
    ],
)
def test_from_options_query_type(query_type, config):
    assert TokenizerConfig.from_options(query_type=query_type) == config
    assert TokenizerConfig.from_options(
        query_type=query_type, break_point="9", normalization="x"
    ) == config


def test_from_options_break_point_zero():
    config = TokenizerConfig.from_options(
        break_point="0", normalization="h", greek=True, stemmer="p"
    )
    assert config == TokenizerConfig(BreakPoint.NONE, None, False, Stemming.NONE)


@pytest.mark.parametrize(
    "options, config",
    [
        (
            {"break_point": "2", "normalization": "h", "greek": True, "stemmer": "l"},
            TokenizerConfig(BreakPoint.ALNUM, RecombineMode.HYPHEN, True, Stemming.LOVINS),
        ),
        (
            {"break_point": 3, "normalization": "j"},
            TokenizerConfig(BreakPoint.WORD_CLASS, RecombineMode.CONCAT, False, Stemming.NONE),
        ),
        (
            {"break_point": BreakPoint.DELIMITER, "normalization": RecombineMode.SPACE, "stemmer": Stemming.S},
            TokenizerConfig(BreakPoint.DELIMITER, RecombineMode.SPACE, False, Stemming.S),
        ),
    ],
)
def test_from_options_explicit(options, config):
    assert TokenizerConfig.from_options(**options) == config


@pytest.mark.parametrize(
    "options, error, message",
    [
        ({"query_type": "X"}, QueryTypeError, "query type must be S"),
        ({"break_point": "4"}, BreakPointError, "must be 0, 1, 2 or 3"),
        ({"break_point": "one"}, BreakPointError, "must be 0, 1, 2 or 3"),
        ({"break_point": "1"}, NormalizationError, "must be specified"),
        ({"break_point": "1", "normalization": "x"}, NormalizationError, "'h', 's' or 'j'"),
        ({"break_point": "1", "normalization": "s", "stemmer": "k"}, StemmerError, "'p', 'l' or 's'"),
        ({"break_point": "1", "normalization": "h", "stemmer": ""}, StemmerError, "'p', 'l' or 's'"),
    ],
)
def test_from_options_errors(options, error, message):
    with pytest.raises(error, match=message) as exc_info:
        TokenizerConfig.from_options(**options)

    assert isinstance(exc_info.value, ConfigError)
    assert isinstance(exc_info.value, ValueError)


def test_config_from_plain_codes():
    config = TokenizerConfig(1, "s", False, "p")

    assert config == TokenizerConfig.verbose()
    assert config.break_point is BreakPoint.DELIMITER
    assert config.mode is RecombineMode.SPACE
    assert config.stemmer is Stemming.PORTER
    assert TokenizerConfig(0, None, False, "").mode is None


def test_config_rejects_unknown_codes():
    with pytest.raises(ValueError):
        TokenizerConfig(4, "s", False, "p")
    with pytest.raises(ValueError):
        TokenizerConfig(1, "x", False, "p")
