"""
Command line entry point.

    plagcheck ORIGINAL PLAGIARIZED OUTPUT [--backend rapidfuzz] [--json]

Exit status is 0 on success, 1 for invalid arguments and 2 for I/O failures.
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from .core.config import LOG_LEVELS, load_settings
from .core.logging_config import setup_logging
from .core.plagiarism_detector import PlagiarismDetector
from .core.sequence_similarity import BACKENDS
from .core.similarity_calculator import SimilarityCalculator
from .core.validation import DocumentIOError, ValidationError

EXIT_OK = 0
EXIT_INVALID_ARGUMENT = 1
EXIT_IO_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plagcheck",
        description="Estimate how similar two text documents are (0.00 - 1.00).",
    )
    parser.add_argument("original", help="Path to the original document")
    parser.add_argument("plagiarized", help="Path to the document suspected of plagiarism")
    parser.add_argument("output", help="File the similarity is written to")
    parser.add_argument("--backend", choices=BACKENDS, default=None,
                        help="Sequence measure implementation (default: from settings)")
    parser.add_argument("--log-level", choices=[level.upper() for level in LOG_LEVELS], default=None,
                        help="Logging level (default: from settings)")
    parser.add_argument("--json", action="store_true", help="Print the full comparison report as JSON")
    parser.add_argument("--quiet", action="store_true", help="Do not print the result")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e.message}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    setup_logging(
        log_level=args.log_level or settings.log_level,
        log_dir=settings.log_dir,
        structured_logging=settings.structured_logs,
        enable_file=settings.log_to_file,
    )

    try:
        if args.backend:
            settings = replace(settings, backend=args.backend)
        calculator = SimilarityCalculator.from_settings(settings)
        detector = PlagiarismDetector(calculator=calculator, max_text_length=settings.max_text_length)
        report = detector.run(args.original, args.plagiarized, args.output)
    except ValidationError as e:
        print(f"Invalid argument: {e.message}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except DocumentIOError as e:
        print(f"File operation failed: {e.message}", file=sys.stderr)
        return EXIT_IO_FAILURE

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    elif not args.quiet:
        print(f"Similarity: {report.comprehensive * 100:.2f}%")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
