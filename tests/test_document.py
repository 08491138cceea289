from datetime import datetime, timezone

import pytest

from cinder.document import (
    Document,
    document_attributes,
    extract_excerpt,
    permalink_attributes,
)
from cinder.model.frontmatter import Frontmatter, SourceFormat
from cinder.model.permalink import format_url_as_file


def _front(**kwargs):
    values = {"slug": "my-post", "title": "My Post"}
    values.update(kwargs)
    return Frontmatter(**values)


def test_permalink_attributes_basic():
    attrs = permalink_attributes(_front(categories=["news", "tech"]), "blog/my-post.md")
    assert attrs["parent"] == "blog"
    assert attrs["name"] == "my-post"
    assert attrs["ext"] == ".html"
    assert attrs["slug"] == "my-post"
    assert attrs["categories"] == "news/tech"
    assert "year" not in attrs


def test_permalink_attributes_top_level_file_has_empty_parent():
    attrs = permalink_attributes(_front(), "index.md")
    assert attrs["parent"] == ""
    assert attrs["name"] == "index"


def test_permalink_attributes_dates_are_padded():
    date = datetime(2021, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
    attrs = permalink_attributes(_front(published_date=date), "a.md")
    assert attrs["year"] == "2021"
    assert attrs["month"] == "03"
    assert attrs["i_month"] == "3"
    assert attrs["day"] == "05"
    assert attrs["i_day"] == "5"
    assert attrs["hour"] == "07"
    assert attrs["minute"] == "08"
    assert attrs["second"] == "09"


def test_document_attributes_without_date():
    attrs = document_attributes(_front(tags=["x"]), "posts/a.md", "posts/a.html")
    assert attrs["permalink"] == "posts/a.html"
    assert attrs["description"] == ""
    assert attrs["tags"] == ["x"]
    assert attrs["file"] == {"permalink": "posts/a.md", "parent": "posts"}
    assert "published_date" not in attrs


def test_document_attributes_with_date():
    date = datetime(2020, 1, 1, tzinfo=timezone.utc)
    attrs = document_attributes(_front(published_date=date), "a.md", "a.html")
    assert attrs["published_date"] == date


def test_create_places_document_by_permalink():
    doc = Document.create("body", "blog/my-post.md", _front())
    assert doc.url_path == "blog/my-post.html"
    assert doc.file_path == format_url_as_file(doc.url_path)
    assert doc.attributes["permalink"] == doc.url_path
    assert doc.content == "body"


def test_create_uses_slug_in_custom_permalink():
    doc = Document.create("", "x.md", _front(permalink="/posts/{{slug}}/"))
    assert doc.url_path == "posts/my-post/"
    assert doc.file_path.endswith("index.html")


def test_create_with_unknown_variable_fails():
    with pytest.raises(ValueError, match="Failed to create permalink"):
        Document.create("", "x.md", _front(permalink="/{{missing}}"))


def test_extract_excerpt_raw():
    assert extract_excerpt("first\n\nsecond", SourceFormat.RAW, "\n\n") == "first"


def test_extract_excerpt_raw_without_separator_returns_all():
    assert extract_excerpt("only", SourceFormat.RAW, "<!--more-->") == "only"


def test_extract_excerpt_markdown_keeps_references():
    ref = "[1]: http://example.com"
    content = f"Intro [link][1]\n\nMore\n\n{ref}\n"
    result = extract_excerpt(content, SourceFormat.MARKDOWN, "\n\n")
    assert result == f"{ref}\nIntro [link][1]"


def test_description_prefers_frontmatter():
    doc = Document.create("", "a.md", _front(description="desc"))
    doc.attributes["excerpt"] = "ex"
    assert doc.description_to_str() == "desc"


def test_description_falls_back_to_excerpt_then_content():
    doc = Document.create("", "a.md", _front())
    assert doc.description_to_str() is None
    doc.attributes["content"] = "<p>full</p>"
    assert doc.description_to_str() == "<p>full</p>"
    doc.attributes["excerpt"] = None
    assert doc.description_to_str() == "<p>full</p>"
    doc.attributes["excerpt"] = "<p>short</p>"
    assert doc.description_to_str() == "<p>short</p>"


def test_jsonfeed_uses_categories_when_no_tags():
    doc = Document.create("", "a.md", _front(categories=["cat"]))
    item = doc.to_jsonfeed("https://example.com")
    assert item["id"] == item["url"] == f"https://example.com/{doc.url_path}"
    assert item["tags"] == ["cat"]
    assert item["content_html"] == ""
    assert "date_published" not in item


def test_jsonfeed_prefers_tags_and_formats_date():
    date = datetime(2021, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
    doc = Document.create(
        "", "a.md", _front(tags=["t"], categories=["c"], published_date=date)
    )
    item = doc.to_jsonfeed("https://example.com")
    assert item["tags"] == ["t"]
    assert item["title"] == "My Post"
    assert item["date_published"] == "Fri, 05 Mar 2021 07:08:09 +0000"