"""Article dataclasses for Ghost publishing."""

from dataclasses import dataclass, field


@dataclass
class GhostArticle:
    """An extracted technique formatted as a standalone Ghost article."""
    title: str
    slug: str
    content: str
    tag: str
    category: str


@dataclass
class ArticleFile:
    """An article markdown file read back for posting."""
    title: str
    content: str
    tags: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        content_preview = self.content[:100] + "..." if len(self.content) > 100 else self.content
        return f"ArticleFile(title={self.title!r}, tags={self.tags!r}, content={content_preview!r})"
