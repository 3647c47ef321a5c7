#!/usr/bin/env python3
"""
Crossposter CLI

Command-line interface for publishing enriched-markdown (MDX) articles
to other platforms.

Usage:
    python -m crossposter <source> [options]
    python -m crossposter pages/practical-skills/config/why-claude-md-matters.mdx
    python -m crossposter pages/practical-skills/config/                 # every article in a directory
    python -m crossposter a.mdx b.mdx --format markdown                 # several articles

Options:
    -o, --output-dir DIR   Output directory (default: dist/articles)
    --format FORMAT        all, markdown or wechat (default: all)
    --base-url URL         Site address used for absolute image paths
    --stdout               Print the portable markdown instead of saving files
    --formats              Show supported input and output formats
"""

import argparse
import sys

from crossposter.config import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    FORMAT_ALL,
    FORMAT_WECHAT,
    OUTPUT_FORMATS,
    PublisherConfig,
)
from crossposter.core import Publisher
from crossposter.document import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crossposter",
        description=(
            "MDX Multi-Platform Publisher\n\n"
            "Converts an enriched-markdown article into portable markdown\n"
            "(Zhihu/Juejin), inline-styled HTML (WeChat), a short summary\n"
            "and a cover image page."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m crossposter pages/practical-skills/config/why-claude-md-matters.mdx\n"
            "  python -m crossposter pages/getting-started/ --format markdown\n"
            "  python -m crossposter article.mdx --stdout\n"
            "  python -m crossposter article.mdx -o ./out --base-url https://example.com\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Article files or directories to convert",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=FORMAT_ALL,
        help="Artifacts to produce (default: all)",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Site address for root-relative images (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the portable markdown to stdout instead of saving files",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show supported input and output formats and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return 0

    if not args.sources:
        parser.print_help()
        return 0

    engine = Publisher(PublisherConfig(base_url=args.base_url, output_dir=args.output_dir))
    save = not args.stdout

    print("=" * 60)
    print("  CROSSPOSTER - MDX Multi-Platform Publisher")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            results = engine.convert(source, output_format=args.output_format, save=save)
        except (OSError, ValueError, ConversionError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        for result in results:
            if args.stdout:
                print(result.markdown)
                print("\n" + "=" * 60 + "\n")
            elif args.output_format in (FORMAT_ALL, FORMAT_WECHAT):
                print(f"[SUMMARY] ({len(result.summary)} chars) {result.summary}")
            success_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    return 1 if error_count else 0


def _show_formats():
    """Display supported formats."""
    formats = Publisher.supported_formats()
    print("\nSupported Formats:")
    print("-" * 40)
    for category, entries in formats.items():
        print(f"\n  {category}:")
        for entry in entries:
            print(f"    {entry}")
    print()


if __name__ == "__main__":
    sys.exit(main())
