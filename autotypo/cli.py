"""
Command-line batch corrector.

Reads text from files (or stdin), runs the correction engine over it
and prints a summary, the corrected text, or a JSON report.

Usage:
    autotypo notes.txt
    autotypo --apply < draft.txt > fixed.txt
    autotypo --json --dictionary terms.yaml chapter*.txt
    python -m autotypo --ignore teh --no-context notes.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from autotypo.config import EngineConfig
from autotypo.engine import CorrectionEngine
from autotypo.exceptions import AutoTypoError, ConfigurationError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def load_dictionary(path: Path) -> dict[str, str]:
    """
    Load a misspelling -> correction mapping from a YAML or JSON file.

    YAML is a superset of JSON, so one loader handles both.

    Raises:
        ConfigurationError: If the file is unreadable or not a flat
            string mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read dictionary {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid dictionary file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Dictionary file {path} must contain a mapping")

    dictionary = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigurationError(
                f"Dictionary file {path}: entry {key!r}: {value!r} is not a string pair"
            )
        dictionary[key] = value
    logger.debug("Loaded %d entries from %s", len(dictionary), path)
    return dictionary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autotypo",
        description="Find and fix common typing mistakes in text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "files", type=Path, nargs="*", help="Text file(s) to check (default: stdin)"
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--apply", action="store_true", help="Print the corrected text instead of a summary"
    )
    output.add_argument("--json", action="store_true", help="Print a JSON report")

    parser.add_argument(
        "--dictionary",
        type=Path,
        action="append",
        default=[],
        metavar="PATH",
        help="YAML/JSON mapping of misspelling -> correction (repeatable)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="WORD",
        help="Never correct this word (repeatable)",
    )
    parser.add_argument("--min-word-length", type=int, metavar="N", help="Skip shorter words")
    parser.add_argument(
        "--max-suggestions", type=int, metavar="N", help="Cap on suggestions per word"
    )
    parser.add_argument(
        "--case-sensitive", action="store_true", help="Match dictionary keys case-sensitively"
    )
    parser.add_argument("--no-context", action="store_true", help="Disable context rules")
    parser.add_argument(
        "--no-known-words",
        action="store_true",
        help="Also run fuzzy matching on words found in the English word list",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> EngineConfig:
    """Translate parsed arguments into an EngineConfig."""
    custom: dict[str, str] = {}
    for path in args.dictionary:
        custom.update(load_dictionary(path))

    overrides: dict[str, Any] = {
        "custom_dictionary": custom,
        "ignored_words": list(args.ignore),
        "case_sensitive": args.case_sensitive,
        "context_aware": not args.no_context,
        "skip_known_words": not args.no_known_words,
        "auto_apply_corrections": args.apply,
    }
    if args.min_word_length is not None:
        overrides["min_word_length"] = args.min_word_length
    if args.max_suggestions is not None:
        overrides["max_suggestions"] = args.max_suggestions
    return EngineConfig(**overrides)


def read_inputs(files: Sequence[Path]) -> list[tuple[str, str]]:
    """
    Read (name, text) pairs from files, or from stdin if none given.

    Raises:
        ConfigurationError: If a file cannot be read.
    """
    if not files:
        return [("<stdin>", sys.stdin.read())]

    inputs = []
    for path in files:
        try:
            inputs.append((str(path), path.read_text(encoding="utf-8")))
        except OSError as e:
            raise ConfigurationError(f"Cannot read {path}: {e}") from e
    return inputs


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = CorrectionEngine(config_from_args(args))
        inputs = read_inputs(args.files)
    except AutoTypoError as e:
        print(f"autotypo: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    reports = []
    for name, text in inputs:
        report = engine.correct_text(text)
        logger.info("%s: %d corrections", name, report.change_count)

        if args.apply:
            sys.stdout.write(report.corrected)
        elif args.json:
            reports.append({"source": name, **report.to_dict()})
        else:
            for record in report.corrections:
                suggestions = ", ".join(record.suggestions)
                print(
                    f"{name}:{record.start}-{record.end}: {record.original} -> "
                    f"{record.corrected} ({record.strategy.value}, {record.confidence:.2f})"
                    + (f" [{suggestions}]" if suggestions else "")
                )

    if args.json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))

    return EXIT_OK
