"""Technique extraction from the master markdown document."""

from .extractor import (
    DEFAULT_CATEGORY,
    SectionExtractor,
    extract,
    find_enclosing_category,
    find_subsection,
    get_heading_level,
    heading_text,
    list_all_subsection_titles,
    slugify,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "SectionExtractor",
    "extract",
    "find_enclosing_category",
    "find_subsection",
    "get_heading_level",
    "heading_text",
    "list_all_subsection_titles",
    "slugify",
]
