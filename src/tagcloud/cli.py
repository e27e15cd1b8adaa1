#!/usr/bin/env python3
"""Tag cloud generator CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .clean import clean_outputs, get_cleanable_paths
from .config import CloudConfig
from .core.errors import InvalidWordCountError, MalformedNumberError, TagCloudError
from .pipeline import generate_tag_cloud, load_counts

INPUT_PROMPT = "Enter a file to read from: "
OUTPUT_PROMPT = "Enter a file to be written to: "
COUNT_PROMPT = "Enter a valid number of words for the tag cloud: "


def parse_word_count(raw: str) -> int:
    """Parse a word count typed by the user.

    Raises:
        MalformedNumberError: If ``raw`` is not an integer.
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise MalformedNumberError(raw) from None


def validate_word_count(n: int, available: int) -> int:
    """Check that ``n`` is within [0, available]."""
    if not 0 <= n <= available:
        raise InvalidWordCountError(n, available)
    return n


def prompt_word_count(available: int) -> int:
    """Ask for a word count until one within range is entered.

    Raises:
        MalformedNumberError: If a non-integer is entered.
    """
    while True:
        n = parse_word_count(input(COUNT_PROMPT))
        if 0 <= n <= available:
            return n
        print("Input outside range.")


def main() -> int:
    """Generate a tag cloud."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Prompt for everything
  %(prog)s book.txt -o cloud.html -n 50     # Top 50 words
  %(prog)s https://example.com/book.txt -o cloud.html -n 100
  %(prog)s book.txt -o cloud.html -n 50 --config tagcloud.yml
  %(prog)s -o cloud.html --clean            # Move output and cache to trash
  %(prog)s -o cloud.html --clean --permanent  # Permanently delete them
        """,
    )

    parser.add_argument("input", nargs="?", help="Text file or URL to read (prompted if omitted)")
    parser.add_argument("-o", "--output", type=Path, help="HTML file to write (prompted if omitted)")
    parser.add_argument(
        "-n",
        "--count",
        metavar="N",
        help="Number of words in the cloud (prompted if omitted)",
    )

    # Settings
    parser.add_argument("--config", type=Path, metavar="PATH", help="YAML settings file")
    parser.add_argument("--stylesheet", metavar="URL", help="Stylesheet defining font classes")
    parser.add_argument("--separators", metavar="CHARS", help="Characters that split words")
    parser.add_argument("--encoding", help="Encoding of the input file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug logging")

    # Clean mode
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Clean the output file and download cache (move to trash by default)",
    )
    parser.add_argument(
        "--clean-list",
        action="store_true",
        help="List files that would be cleaned (preview only)",
    )
    parser.add_argument(
        "--permanent",
        action="store_true",
        help="Permanently delete files instead of moving to trash (use with --clean)",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip confirmation prompt (use with --clean)",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Load config
    if args.config is not None and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = CloudConfig.from_yaml(args.config) if args.config else CloudConfig()
        config.override(
            stylesheet=args.stylesheet,
            separators=args.separators,
            encoding=args.encoding,
        )
    except (ValueError, KeyError) as e:
        print(f"Error: Invalid config: {e}", file=sys.stderr)
        return 1

    if args.clean_list:
        return _handle_clean_list(config, args.output)

    if args.clean:
        return _handle_clean(config, args.output, permanent=args.permanent, skip_confirm=args.yes)

    try:
        source = args.input or input(INPUT_PROMPT).strip()
        output = args.output or Path(input(OUTPUT_PROMPT).strip())
    except EOFError:
        print("Error: No input given.", file=sys.stderr)
        return 1

    try:
        counts = load_counts(source, config)
    except TagCloudError as e:
        print(f"Error opening files: {e}", file=sys.stderr)
        return 1

    try:
        if args.count is not None:
            n = validate_word_count(parse_word_count(args.count), len(counts))
        else:
            n = prompt_word_count(len(counts))
    except (MalformedNumberError, InvalidWordCountError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: No word count given.", file=sys.stderr)
        return 1

    try:
        generate_tag_cloud(source, output, n, config, counts=counts)
    except TagCloudError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Top {n} of {len(counts)} words in {source} -> {output}")
    return 0


def _handle_clean_list(config: CloudConfig, output: Path | None) -> int:
    """List files that would be cleaned.

    Returns:
        Exit code (0 for success).
    """
    paths = get_cleanable_paths(config, output)
    existing = [(name, path) for name, path, exists in paths if exists]

    if existing:
        print("Files that would be cleaned:\n")
        for name, path in existing:
            print(f"  {name}: {path}")
        print(f"\nTotal: {len(existing)} file(s) exist")
    else:
        print("No files to clean.")

    return 0


def _handle_clean(
    config: CloudConfig, output: Path | None, permanent: bool, skip_confirm: bool
) -> int:
    """Handle the --clean command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    paths = get_cleanable_paths(config, output)
    existing = [(name, path) for name, path, exists in paths if exists]

    if not existing:
        print("No files to clean.")
        return 0

    action = "permanently deleted" if permanent else "moved to trash"
    print(f"\nThe following files will be {action}:\n")
    for name, path in existing:
        print(f"  {name}: {path}")
    print()

    if not skip_confirm:
        prompt = "These files will be moved to trash. Continue? [y/N] "
        if permanent:
            prompt = "These files will be PERMANENTLY DELETED. Continue? [y/N] "
        response = input(prompt).strip().lower()
        if response not in ("y", "yes"):
            print("Cancelled.")
            return 0

    results = clean_outputs(config, output, permanent=permanent)

    cleaned = sum(1 for r in results if r.action in ("trashed", "deleted"))
    failed = [r for r in results if not r.success]

    if cleaned > 0:
        action_past = "Permanently deleted" if permanent else "Moved to trash"
        print(f"{action_past}: {cleaned} file(s)")
    if failed:
        print(f"Failed: {len(failed)} file(s)")
        for r in failed:
            print(f"  {r.path}: {r.error}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
