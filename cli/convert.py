#!/usr/bin/env python3
"""CLI for converting one technique from the master document into a Ghost article."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from perfarticles.config import load_config
from perfarticles.extraction import SectionExtractor
from perfarticles.publishing import format_for_ghost

load_dotenv()

FALLBACK_SLUG = "untitled"

EXAMPLES = """
Examples:
  python cli/convert.py "Use async and await correctly"
  python cli/convert.py async

To list every technique:
  python cli/convert.py --list
"""


def print_techniques(extractor: SectionExtractor) -> None:
    titles = list(extractor.titles())
    print(f"\nTotal techniques found: {len(titles)}\n")
    for index, title in enumerate(titles, start=1):
        print(f"{index}. {title}")


def print_not_found(search_term: str) -> None:
    print(f'\nNo technique found for: "{search_term}"', file=sys.stderr)
    print("\nSuggestions:")
    print("  - Use --list to see every available technique")
    print("  - Try part of the technique name")
    print("  - Matching is case-insensitive")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Extract a technique from the master document and format it for Ghost",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "search",
        nargs="*",
        help="Technique name or part of it"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all techniques and exit"
    )
    parser.add_argument(
        "--document",
        type=Path,
        help="Master markdown document (default: source_document from config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: config/perfarticles.yaml)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the generated article (default: current directory)"
    )
    parser.add_argument(
        "--stdout-only",
        action="store_true",
        help="Print the article without writing it to a file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    search_term = " ".join(args.search).strip()
    if not args.list and not search_term:
        parser.print_usage(sys.stderr)
        print(EXAMPLES, file=sys.stderr)
        sys.exit(1)

    try:
        settings = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    document_path = args.document or settings.source_document
    if not document_path.is_file():
        print(f"Error: {document_path} not found", file=sys.stderr)
        sys.exit(1)

    document = document_path.read_text(encoding="utf-8")
    extractor = SectionExtractor(document, default_category=settings.default_category)

    if args.list:
        print_techniques(extractor)
        return

    result = extractor.extract(search_term)
    if result is None:
        print_not_found(search_term)
        sys.exit(1)

    article = format_for_ghost(result, extra_tags=settings.extra_tags)

    print("\n" + "=" * 80)
    print("ARTICLE READY FOR GHOST")
    print("=" * 80)
    print(f"\nTitle:    {article.title}")
    print(f"Tag:      {article.tag}")
    print(f"Category: {article.category}")
    print(f"Slug:     {article.slug}")
    print("\n" + "-" * 80)
    print("CONTENT (paste into Ghost Admin -> New Post):")
    print("-" * 80 + "\n")
    print(article.content)
    print("\n" + "=" * 80)

    if args.stdout_only:
        return

    slug = article.slug
    if not slug:
        slug = FALLBACK_SLUG
        print(f"Warning: title has no URL-safe characters, using \"{slug}\"", file=sys.stderr)

    output_path = args.output_dir / f"{settings.output_prefix}{slug}.md"
    args.output_dir.mkdir(parents=True, exist_ok=True)
    output_path.write_text(article.content, encoding="utf-8")
    print(f"Saved to: {output_path}\n")


if __name__ == "__main__":
    main()
