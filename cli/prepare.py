#!/usr/bin/env python3
"""CLI for preparing an article file as a Ghost Admin API post."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from perfarticles.config import load_config
from perfarticles.publishing import (
    GhostPostsRequest,
    archive_article,
    build_post_payload,
    parse_article,
)

load_dotenv()

DEFAULT_ARTICLE_PATH = Path("example-article.md")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Print the Ghost Admin API payload for an article file"
    )
    parser.add_argument(
        "article",
        nargs="?",
        type=Path,
        default=DEFAULT_ARTICLE_PATH,
        help=f"Article markdown file (default: {DEFAULT_ARTICLE_PATH})"
    )
    parser.add_argument(
        "--status",
        choices=["draft", "published"],
        default="published",
        help="Post status (default: published)"
    )
    parser.add_argument(
        "--archive",
        action="store_true",
        help="Copy the article into the articles directory"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: config/perfarticles.yaml)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.article.is_file():
        print(f"Error: Article not found: {args.article}", file=sys.stderr)
        sys.exit(1)

    article = parse_article(args.article.read_text(encoding="utf-8"))
    print(f'Preparing article: "{article.title}"', file=sys.stderr)
    print(f"Tags: {', '.join(article.tags)}", file=sys.stderr)

    try:
        post = build_post_payload(article, status=args.status)
    except ValidationError as e:
        print(f"Error: Invalid post: {e}", file=sys.stderr)
        sys.exit(1)

    print(GhostPostsRequest(posts=[post]).model_dump_json(indent=2))

    if args.archive:
        destination = archive_article(args.article, settings.articles_dir, article.title)
        print(f"Archived to: {destination}", file=sys.stderr)


if __name__ == "__main__":
    main()
