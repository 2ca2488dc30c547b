"""Core domain models."""

from .article import ArticleFile, GhostArticle
from .section import ExtractionResult, Subsection

__all__ = ["ArticleFile", "ExtractionResult", "GhostArticle", "Subsection"]
