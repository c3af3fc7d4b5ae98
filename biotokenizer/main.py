# biotokenizer/main.py
import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import TokenizerConfig
from .document import DocumentFilter
from .errors import ConfigError
from .logging_config import setup_logging
from .tokenize import Tokenizer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biotokenizer",
        description=(
            "Tokenize biomedical text for ad-hoc retrieval. Use -t S for gene/"
            "protein symbol queries and -t V (the default) for verbose queries."
        ),
    )
    parser.add_argument("-i", dest="input", required=True, help="input file")
    parser.add_argument("-o", dest="output", required=True, help="output file")
    parser.add_argument("-t", dest="query_type", help="query type [S|V]")
    parser.add_argument("-b", dest="break_point", help="break point set [0|1|2|3]")
    parser.add_argument(
        "-n", dest="normalization", help="break point normalization method [h|s|j]"
    )
    parser.add_argument(
        "-g", dest="greek", action="store_true", help="Greek alphabet normalization"
    )
    parser.add_argument(
        "-s", dest="stemmer", help="stemming method [p(orter)|l(ovins)|s]"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        tokenizer_config = TokenizerConfig.from_options(
            query_type=args.query_type,
            break_point=args.break_point,
            normalization=args.normalization,
            greek=args.greek,
            stemmer=args.stemmer,
        )
    except ConfigError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    logger.info(f"Tokenizing '{args.input}' into '{args.output}' with {tokenizer_config}")

    document_filter = DocumentFilter(Tokenizer(tokenizer_config))
    with open(args.input, encoding="utf-8") as src, open(
        args.output, "w", encoding="utf-8"
    ) as dst:
        dst.writelines(document_filter.process(src))

    return 0


if __name__ == "__main__":
    sys.exit(main())
