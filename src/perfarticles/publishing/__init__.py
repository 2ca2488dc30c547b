"""Ghost formatting and article file preparation."""

from .article import (
    archive_article,
    build_mobiledoc,
    build_post_payload,
    clean_content,
    extract_tags,
    extract_title,
    parse_article,
    safe_filename,
)
from .ghost import DEFAULT_EXTRA_TAGS, derive_tag, format_for_ghost, tags_comment
from .models import GhostPost, GhostPostsRequest, GhostTag

__all__ = [
    "DEFAULT_EXTRA_TAGS",
    "GhostPost",
    "GhostPostsRequest",
    "GhostTag",
    "archive_article",
    "build_mobiledoc",
    "build_post_payload",
    "clean_content",
    "derive_tag",
    "extract_tags",
    "extract_title",
    "format_for_ghost",
    "parse_article",
    "safe_filename",
    "tags_comment",
]
