"""Read article markdown files back and prepare them for posting to Ghost."""

import json
import logging
import re
import shutil
from pathlib import Path

from perfarticles.core import ArticleFile
from .ghost import DEFAULT_EXTRA_TAGS
from .models import GhostPost, GhostTag

logger = logging.getLogger(__name__)

MOBILEDOC_VERSION = "0.3.1"
MAX_FILENAME_LENGTH = 100

HTML_COMMENT = re.compile(r'<!--.*?-->', re.DOTALL)
TITLE_HEADING = re.compile(r'^#\s+(.+)$', re.MULTILINE)
TAGS_COMMENT = re.compile(r'<!--\s*Tags\s*(?:sugeridos)?:?\s*(.+?)\s*-->', re.IGNORECASE | re.DOTALL)


def clean_content(markdown: str) -> str:
    """Remove HTML comments (such as the suggested tags) from markdown."""
    return HTML_COMMENT.sub('', markdown).strip()


def extract_title(markdown: str) -> str:
    """Get the text of the first level-1 heading, or "Untitled"."""
    match = TITLE_HEADING.search(markdown)
    return match.group(1).strip() if match else "Untitled"


def extract_tags(markdown: str) -> list[str]:
    """Read suggested tags from a <!-- Tags: a, b --> comment.

    Both "Tags:" and "Tags sugeridos:" are accepted. Articles without the
    comment get the default Performance/Optimization tags.
    """
    match = TAGS_COMMENT.search(markdown)
    if match:
        return [tag.strip() for tag in match.group(1).split(',') if tag.strip()]
    return list(DEFAULT_EXTRA_TAGS)


def parse_article(markdown: str) -> ArticleFile:
    """Split an article file into title, tags and postable content."""
    return ArticleFile(
        title=extract_title(markdown),
        content=clean_content(markdown),
        tags=extract_tags(markdown),
    )


def safe_filename(title: str) -> str:
    """Build an archive filename from an article title.

    e.g., "Use Span<T> for Buffers" -> "use-span-t-for-buffers.md"
    """
    stem = re.sub(r'[^a-z0-9]+', '-', title.lower()).strip('-')
    return stem[:MAX_FILENAME_LENGTH] + ".md"


def build_mobiledoc(markdown: str) -> dict:
    """Wrap markdown in a mobiledoc document with a single markdown card."""
    return {
        "version": MOBILEDOC_VERSION,
        "atoms": [],
        "cards": [["markdown", {"markdown": markdown}]],
        "markups": [],
        # 10 = card section, pointing at card 0
        "sections": [[10, 0]],
    }


def build_post_payload(article: ArticleFile, status: str = "published") -> GhostPost:
    """Build the Ghost Admin API post body for an article.

    Raises:
        pydantic.ValidationError: If the title is empty or status is unknown
    """
    return GhostPost(
        title=article.title,
        status=status,
        mobiledoc=json.dumps(build_mobiledoc(article.content)),
        tags=[GhostTag(name=tag) for tag in article.tags],
    )


def archive_article(source: Path, articles_dir: Path, title: str) -> Path:
    """Copy an article file into the articles directory.

    Args:
        source: Article file to copy
        articles_dir: Destination directory, created if missing
        title: Article title used to name the copy

    Returns:
        Path of the archived copy
    """
    if not articles_dir.exists():
        articles_dir.mkdir(parents=True)
        logger.info("Created articles directory %s", articles_dir)

    destination = articles_dir / safe_filename(title)
    shutil.copyfile(source, destination)
    logger.info("Archived %s to %s", source, destination)
    return destination
