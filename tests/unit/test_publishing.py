"""Unit tests for the publishing module."""

import json

import pytest
from pydantic import ValidationError

from perfarticles.core import ArticleFile, ExtractionResult
from perfarticles.publishing import (
    archive_article,
    build_mobiledoc,
    build_post_payload,
    clean_content,
    derive_tag,
    extract_tags,
    extract_title,
    format_for_ghost,
    parse_article,
    safe_filename,
)


@pytest.fixture
def result():
    return ExtractionResult(
        title="Use X",
        content="Body text.",
        slug="use-x",
        category="Cat",
        full_section="### Use X\n\nBody text.",
    )


class TestDeriveTag:
    """Tests for derive_tag()."""

    def test_dotnet_prefix_dropped(self):
        assert derive_tag(".NET Runtime") == "NET Runtime"
        assert derive_tag("ASP.NET Core") == "ASPNET Core"

    def test_and_replaced(self):
        assert derive_tag("Memory and GC") == "Memory & GC"

    def test_and_inside_words_kept(self):
        assert derive_tag("Bandwidth and Latency") == "Bandwidth & Latency"

    def test_plain_category_unchanged(self):
        assert derive_tag("Databases") == "Databases"


class TestFormatForGhost:
    """Tests for format_for_ghost()."""

    def test_article_content(self, result):
        article = format_for_ghost(result)
        assert article.content == (
            "# Use X\n\nBody text.\n\n"
            "<!-- Tags sugeridos: Cat, Performance, Optimization -->"
        )

    def test_metadata(self, result):
        article = format_for_ghost(result)
        assert article.title == "Use X"
        assert article.slug == "use-x"
        assert article.tag == "Cat"
        assert article.category == "Cat"

    def test_custom_extra_tags(self, result):
        article = format_for_ghost(result, extra_tags=["Speed"])
        assert article.content.endswith("<!-- Tags sugeridos: Cat, Speed -->")

    def test_round_trip_through_article_parsing(self, result):
        """A formatted article reads back with the same title and tags."""
        parsed = parse_article(format_for_ghost(result).content)
        assert parsed.title == "Use X"
        assert parsed.tags == ["Cat", "Performance", "Optimization"]
        assert parsed.content == "# Use X\n\nBody text."


class TestArticleParsing:
    """Tests for clean_content(), extract_title() and extract_tags()."""

    def test_clean_content_removes_comments(self):
        markdown = "# Title\n\nText.\n\n<!-- a\nmulti-line\ncomment -->\n"
        assert clean_content(markdown) == "# Title\n\nText."

    def test_extract_title(self):
        assert extract_title("Intro\n\n# Real Title  \n\nBody") == "Real Title"

    def test_extract_title_ignores_subheadings(self):
        assert extract_title("## Not a title\n\nBody") == "Untitled"

    def test_extract_tags_short_form(self):
        assert extract_tags("<!-- Tags: a, , b -->") == ["a", "b"]

    def test_extract_tags_case_insensitive(self):
        assert extract_tags("<!-- tags sugeridos: Caching -->") == ["Caching"]

    def test_extract_tags_default(self):
        assert extract_tags("# Title\n\nNo comment.") == ["Performance", "Optimization"]


class TestSafeFilename:
    """Tests for safe_filename()."""

    def test_basic(self):
        assert safe_filename("Use Span<T> for Buffers") == "use-span-t-for-buffers.md"

    def test_truncated(self):
        assert safe_filename("a" * 150) == "a" * 100 + ".md"

    def test_edges_trimmed(self):
        assert safe_filename("  !Hello!  ") == "hello.md"


class TestPostPayload:
    """Tests for build_mobiledoc() and build_post_payload()."""

    def test_mobiledoc_structure(self):
        mobiledoc = build_mobiledoc("# Hi")
        assert mobiledoc["version"] == "0.3.1"
        assert mobiledoc["cards"] == [["markdown", {"markdown": "# Hi"}]]
        assert mobiledoc["sections"] == [[10, 0]]

    def test_payload(self):
        article = ArticleFile(title="Use X", content="# Use X\n\nBody.", tags=["Cat", "Performance"])
        post = build_post_payload(article, status="draft")
        assert post.title == "Use X"
        assert post.status == "draft"
        assert [tag.name for tag in post.tags] == ["Cat", "Performance"]
        assert json.loads(post.mobiledoc)["cards"][0][1]["markdown"] == "# Use X\n\nBody."

    def test_invalid_status(self):
        article = ArticleFile(title="Use X", content="Body.")
        with pytest.raises(ValidationError):
            build_post_payload(article, status="scheduled")

    def test_empty_title(self):
        with pytest.raises(ValidationError):
            build_post_payload(ArticleFile(title="", content="Body."))


class TestArchiveArticle:
    """Tests for archive_article()."""

    def test_creates_directory_and_copies(self, tmp_path):
        source = tmp_path / "draft.md"
        source.write_text("# Use X\n\nBody.")
        articles_dir = tmp_path / "articles"

        destination = archive_article(source, articles_dir, "Use X")

        assert destination == articles_dir / "use-x.md"
        assert destination.read_text() == "# Use X\n\nBody."
        assert source.exists()
