"""
Text Integrity - CLI Entry Point

Usage:
    text-integrity <command> [TEXT] [--file PATH] [--json] [--config config.yaml]

Examples:
    text-integrity scan "walang hiya ka"
    text-integrity censor --file post.txt
    echo "teh dog should of gone" | text-integrity autocorrect
    text-integrity check --title "Meeting" "Everyone are invited." --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import IntegrityConfig
from .engine import TextIntegrityEngine
from .error_handler import TextIntegrityError, get_friendly_message, safe_operation
from .logging_config import setup_logging
from .models import Issue

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2

COMMANDS = ("scan", "censor", "severity", "check", "spell", "grammar", "autocorrect")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="text-integrity",
        description="Profanity, spelling and grammar checks for English and Filipino text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  text-integrity scan "some text"
  text-integrity censor --file post.txt
  text-integrity check --title "Meeting" "Everyone are invited." --json
  text-integrity --strict scan --file comment.txt   # exit 1 on profanity
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when profanity or errors are found"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    helps = {
        "scan": "Detect profanity",
        "censor": "Mask profanity with the mask character",
        "severity": "Classify profanity severity",
        "check": "Full spelling, grammar and readability report",
        "spell": "Spelling check only",
        "grammar": "Grammar check only",
        "autocorrect": "Apply safe automatic corrections",
    }
    for name in COMMANDS:
        sub = subparsers.add_parser(name, help=helps[name])
        sub.add_argument(
            "text",
            nargs="?",
            default=None,
            help="Text to process (default: read --file or stdin)"
        )
        sub.add_argument(
            "--file", "-f",
            type=Path,
            default=None,
            help="Read the text from a UTF-8 file"
        )
        if name == "check":
            sub.add_argument(
                "--title", "-t",
                default="",
                help="Title checked together with the text"
            )

    return parser


def read_input(args: argparse.Namespace) -> str:
    """Text from the positional argument, --file, or stdin, in that order."""
    if args.text is not None:
        return args.text
    if args.file is not None:
        logger.debug(f"Reading input from {args.file}")
        return args.file.read_text(encoding="utf-8")
    return sys.stdin.read()


def _format_issue(issue: Issue) -> str:
    line = f"[{issue.severity.value}] {issue.category.value}/{issue.kind}: {issue.message}"
    if issue.suggestion:
        line += f" (suggestion: {issue.suggestion})"
    return line


def _emit(args: argparse.Namespace, payload, lines: List[str]) -> None:
    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for line in lines:
            print(line)


@safe_operation("text-integrity command")
def run(args: argparse.Namespace) -> int:
    """Execute one parsed command and return its exit code."""
    config = IntegrityConfig.load(args.config)
    setup_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        log_file=config.logging.log_file or None,
        force=True,
    )
    engine = TextIntegrityEngine.from_config(config)
    text = read_input(args)
    found = False

    if args.command == "scan":
        result = engine.scan_profanity(text)
        found = result.has_profanity
        lines = [f"Profanity: {'yes' if found else 'no'}"]
        if found:
            lines.append(f"Language: {result.language}")
            lines.append(f"Matches: {', '.join(result.matches)}")
        _emit(args, result.to_dict(), lines)

    elif args.command == "censor":
        censored = engine.censor(text)
        _emit(args, {"original": text, "censored": censored}, [censored])

    elif args.command == "severity":
        tier = engine.severity(text)
        found = tier != "none"
        _emit(args, {"severity": tier}, [tier])

    elif args.command == "check":
        report = engine.check_text(args.title, text)
        found = bool(report.errors)
        lines = [
            f"Quality score: {report.quality_score}/100 ({report.summary.status})",
            report.summary.message,
            f"Readability: {report.readability.score:.1f} ({report.readability.level})",
        ]
        if report.profanity.has_profanity:
            lines.append(f"Profanity: {', '.join(report.profanity.matches)}")
        lines.extend(_format_issue(i) for i in report.issues)
        _emit(args, report.to_dict(), lines)

    elif args.command in ("spell", "grammar"):
        if args.command == "spell":
            issues = engine.check_spelling(text)
        else:
            issues = engine.check_grammar(text)
        found = any(i.severity.value == "error" for i in issues)
        lines = [_format_issue(i) for i in issues] or ["No issues found."]
        _emit(args, [i.to_dict() for i in issues], lines)

    elif args.command == "autocorrect":
        result = engine.auto_correct(text)
        lines = [result.corrected]
        if args.verbose:
            lines.extend(f"  {c.source} -> {c.target} ({c.type})" for c in result.changes)
        _emit(args, result.to_dict(), lines)

    return EXIT_FINDINGS if (args.strict and found) else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 130
    except TextIntegrityError as e:
        title, message = get_friendly_message(e)
        print(f"Error: {title}\n{message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
