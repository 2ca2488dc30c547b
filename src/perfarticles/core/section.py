"""Subsection and extraction result dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Subsection:
    """A level-3 subsection located inside a master document.

    Offsets index into the document the subsection was found in:
    start_offset is the start of the heading line, content_start the first
    non-blank character after it, and end_offset the boundary where the body
    slice stops (before trailing whitespace is trimmed).
    """
    title: str
    body: str
    heading_line: str
    start_offset: int
    content_start: int
    end_offset: int

    @property
    def full_section(self) -> str:
        """Heading line, a blank line, then the body."""
        return f"{self.heading_line}\n\n{self.body}"

    def __repr__(self) -> str:
        body_preview = self.body[:100] + "..." if len(self.body) > 100 else self.body
        return f"Subsection(title={self.title!r}, start_offset={self.start_offset}, body={body_preview!r})"


@dataclass(frozen=True)
class ExtractionResult:
    """A subsection lifted out of the document together with its metadata."""
    title: str
    content: str
    slug: str
    category: str
    full_section: str
