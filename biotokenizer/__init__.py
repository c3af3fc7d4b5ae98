from .breakpoints import BreakPointExtractor
from .config import BreakPoint, QueryType, RecombineMode, Stemming, TokenizerConfig
from .document import DocumentFilter
from .errors import (
    BreakPointError,
    ConfigError,
    NormalizationError,
    QueryTypeError,
    StemmerError,
)
from .greek import GreekNormalizer
from .lovins import LovinsStemmer
from .recombine import Recombiner
from .stemmer import PorterStemmer, SStemmer
from .tokenize import Tokenizer
