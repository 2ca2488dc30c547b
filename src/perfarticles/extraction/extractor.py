"""Extract a single technique subsection from a master markdown document."""

import logging
import re
from typing import Iterator

from perfarticles.core import ExtractionResult, Subsection

logger = logging.getLogger(__name__)

CATEGORY_LEVEL = 2
SUBSECTION_LEVEL = 3
DEFAULT_CATEGORY = "Performance Optimization"

HEADING_PREFIX = re.compile(r'^(#{1,6})\s+')
CATEGORY_HEADING = re.compile(r'^##[ \t]+(.*)$', re.MULTILINE)
HORIZONTAL_RULE = re.compile(r'^-{3,}[ \t\r]*$', re.MULTILINE)


def get_heading_level(line: str) -> int | None:
    """Get the heading level (1-6) from a markdown line, or None if not a heading.

    Args:
        line: A line of markdown text

    Returns:
        The heading level (1-6) or None if not a heading
    """
    match = HEADING_PREFIX.match(line)
    if match:
        return len(match.group(1))
    return None


def heading_text(line: str) -> str:
    """Strip the heading marker and surrounding whitespace from a heading line."""
    return HEADING_PREFIX.sub('', line, count=1).strip()


def slugify(title: str) -> str:
    """Convert a title into a URL-safe slug.

    e.g., "Use async/await Correctly!" -> "use-asyncawait-correctly"
    """
    slug = title.lower().strip()
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'[^\w\-]+', '', slug, flags=re.ASCII)
    slug = re.sub(r'-{2,}', '-', slug)
    return slug.strip('-')


def _iter_headings(document: str, level: int) -> Iterator[tuple[int, str, str]]:
    """Yield (line_offset, line, title) for every heading of the given level."""
    offset = 0
    for line in document.split('\n'):
        line_start = offset
        offset += len(line) + 1
        if get_heading_level(line) != level:
            continue
        title = heading_text(line)
        if title:
            yield line_start, line, title


def _section_end(document: str, content_start: int) -> int:
    """Find where a subsection body stops.

    The body runs until the first horizontal rule or the next category
    heading, whichever comes first, or to the end of the document.
    """
    end = len(document)

    rule = HORIZONTAL_RULE.search(document, content_start)
    if rule:
        end = rule.start()

    next_category = CATEGORY_HEADING.search(document, content_start)
    if next_category and next_category.start() < end:
        end = next_category.start()

    return end


def find_subsection(document: str, search_term: str) -> Subsection | None:
    """Find the first level-3 subsection whose title matches the search term.

    Titles match case-insensitively when either string contains the other,
    so "async" finds "Use async and await correctly" and so does
    "use async and await correctly please". The first match in document
    order wins.

    Args:
        document: The full markdown document
        search_term: Free-text technique name

    Returns:
        The matching Subsection, or None if no title matches
    """
    search_lower = search_term.lower()

    for line_start, line, title in _iter_headings(document, SUBSECTION_LEVEL):
        title_lower = title.lower()
        if search_lower not in title_lower and title_lower not in search_lower:
            continue

        # Skip the blank padding between the heading and its body
        content_start = line_start + len(line)
        while content_start < len(document) and document[content_start] in '\r\n ':
            content_start += 1

        end = _section_end(document, content_start)
        body = document[content_start:end].rstrip()

        logger.debug(
            "Matched %r at offset %d (body %d:%d)", title, line_start, content_start, end
        )
        return Subsection(
            title=title,
            body=body,
            heading_line=line.rstrip('\r'),
            start_offset=line_start,
            content_start=content_start,
            end_offset=end,
        )

    logger.debug("No subsection matched %r", search_term)
    return None


def find_enclosing_category(
    document: str,
    subsection_offset: int,
    default: str = DEFAULT_CATEGORY
) -> str:
    """Return the closest category heading that starts before an offset.

    Args:
        document: The full markdown document
        subsection_offset: Character offset of the subsection heading
        default: Category returned when no category heading precedes it

    Returns:
        The category heading text without its marker
    """
    category = default
    for match in CATEGORY_HEADING.finditer(document):
        if match.start() >= subsection_offset:
            break
        text = match.group(1).strip()
        if text:
            category = text
    return category


def list_all_subsection_titles(document: str) -> Iterator[str]:
    """Yield every level-3 heading title in document order."""
    found = False
    for _, _, title in _iter_headings(document, SUBSECTION_LEVEL):
        found = True
        yield title

    if not found:
        logger.warning("Document has no level-3 headings")


def extract(
    document: str,
    search_term: str,
    default_category: str = DEFAULT_CATEGORY
) -> ExtractionResult | None:
    """Find a subsection and bundle it with its slug and category.

    Returns:
        ExtractionResult, or None if no subsection matches
    """
    subsection = find_subsection(document, search_term)
    if subsection is None:
        return None

    return ExtractionResult(
        title=subsection.title,
        content=subsection.body,
        slug=slugify(subsection.title),
        category=find_enclosing_category(document, subsection.start_offset, default_category),
        full_section=subsection.full_section,
    )


class SectionExtractor:
    """Extracts technique subsections from one master markdown document."""

    def __init__(self, document: str, default_category: str = DEFAULT_CATEGORY):
        """Initialize the extractor.

        Args:
            document: The full markdown document text
            default_category: Category for subsections with no category heading above them
        """
        self.document = document
        self.default_category = default_category

    def find(self, search_term: str) -> Subsection | None:
        """Find the first subsection matching the search term."""
        return find_subsection(self.document, search_term)

    def category_for(self, subsection: Subsection) -> str:
        """Get the category heading enclosing a subsection."""
        return find_enclosing_category(
            self.document, subsection.start_offset, self.default_category
        )

    def titles(self) -> Iterator[str]:
        """Iterate over all subsection titles."""
        return list_all_subsection_titles(self.document)

    def extract(self, search_term: str) -> ExtractionResult | None:
        """Extract a subsection with its slug and category."""
        return extract(self.document, search_term, self.default_category)
