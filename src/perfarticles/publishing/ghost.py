"""Format an extracted technique as a Ghost-ready markdown article."""

import re
from typing import Sequence

from perfarticles.core import ExtractionResult, GhostArticle

DEFAULT_EXTRA_TAGS = ("Performance", "Optimization")


def derive_tag(category: str) -> str:
    """Turn a category heading into a suggested tag name.

    e.g., "ASP.NET Core and Web APIs" -> "ASPNET Core & Web APIs"
    """
    tag = category.replace(".NET", "NET")
    return re.sub(r'\band\b', '&', tag)


def tags_comment(tags: Sequence[str]) -> str:
    """Build the HTML comment that carries suggested tags in an article file."""
    return f"<!-- Tags sugeridos: {', '.join(tags)} -->"


def format_for_ghost(
    result: ExtractionResult,
    extra_tags: Sequence[str] = DEFAULT_EXTRA_TAGS
) -> GhostArticle:
    """Wrap an extraction as a standalone article.

    The article gets a level-1 title heading, the subsection body, and a
    trailing comment listing the category tag followed by extra_tags.
    """
    tag = derive_tag(result.category)
    content = f"# {result.title}\n\n{result.content}\n\n{tags_comment([tag, *extra_tags])}"

    return GhostArticle(
        title=result.title,
        slug=result.slug,
        content=content,
        tag=tag,
        category=result.category,
    )
