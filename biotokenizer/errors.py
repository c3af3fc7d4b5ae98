class ConfigError(ValueError):
    """Errors raised by TokenizerConfig.from_options"""


class QueryTypeError(ConfigError):
    """Query type is not S(ymbolic) or V(erbose)."""


class BreakPointError(ConfigError):
    """Break point set is not 0, 1, 2 or 3."""


class NormalizationError(ConfigError):
    """Normalization method is missing or not one of h, s, j."""


class StemmerError(ConfigError):
    """Stemming method is not one of p, l, s."""
