from datetime import datetime

import pytest
import yaml

from cinder.model.frontmatter import DEFAULT_PERMALINK, Frontmatter, SourceFormat
from cinder.model.pagination_config import Include


def minimal(**extra):
    config = {"slug": "my-post", "title": "My Post"}
    config.update(extra)
    return config


def test_defaults_applied():
    front = Frontmatter.from_config(minimal())
    assert front.slug == "my-post"
    assert front.title == "My Post"
    assert front.excerpt_separator == "\n\n"
    assert front.templated is True
    assert front.format is SourceFormat.RAW
    assert front.is_draft is False
    assert front.categories == []
    assert front.tags == []
    assert front.permalink == DEFAULT_PERMALINK
    assert front.pagination is None


def test_missing_slug_raises():
    with pytest.raises(ValueError, match="No slug"):
        Frontmatter.from_config({"title": "x"})


def test_missing_title_raises():
    with pytest.raises(ValueError, match="No title"):
        Frontmatter.from_config({"slug": "x"})


def test_empty_tag_raises():
    with pytest.raises(ValueError, match="Empty strings are not allowed in tags"):
        Frontmatter.from_config(minimal(tags=["ok", "  "]))


def test_unknown_field_raises():
    with pytest.raises(ValueError, match="colour"):
        Frontmatter.from_config(minimal(colour="blue"))


def test_explicit_values_kept():
    front = Frontmatter.from_config(
        minimal(
            format="Markdown",
            tags=["a", "b"],
            categories=["x"],
            weight=5,
            layout="post.liquid",
            is_draft=True,
        )
    )
    assert front.format is SourceFormat.MARKDOWN
    assert front.tags == ["a", "b"]
    assert front.categories == ["x"]
    assert front.weight == 5
    assert front.layout == "post.liquid"
    assert front.is_draft is True


def test_published_date_string_parsed():
    front = Frontmatter.from_config(
        minimal(published_date="2016-01-01 09:00:00 +0100")
    )
    assert front.published_date.year == 2016
    assert front.published_date.hour == 9
    assert front.published_date.utcoffset().total_seconds() == 3600


def test_invalid_published_date_raises():
    with pytest.raises(ValueError):
        Frontmatter.from_config(minimal(published_date="not a date"))


def test_pagination_uses_permalink():
    front = Frontmatter.from_config(
        minimal(permalink="/blog/", pagination={"include": "All"})
    )
    assert front.pagination.include is Include.ALL
    assert front.pagination.front_permalink == "/blog/"


def test_pagination_include_none_is_dropped():
    front = Frontmatter.from_config(minimal(pagination={"include": "None"}))
    assert front.pagination is None


def test_unsorted_date_index_raises():
    with pytest.raises(ValueError, match="date_index is not correctly sorted"):
        Frontmatter.from_config(
            minimal(pagination={"include": "Dates", "date_index": ["Month", "Year"]})
        )


def test_str_round_trips_through_yaml():
    date = datetime.strptime("2016-01-01 09:00:00 +0000", "%Y-%m-%d %H:%M:%S %z")
    front = Frontmatter.from_config(
        minimal(tags=["a"], published_date=date, data={"k": "v"})
    )
    loaded = yaml.safe_load(str(front))
    assert loaded["slug"] == "my-post"
    assert loaded["title"] == "My Post"
    assert loaded["tags"] == ["a"]
    assert loaded["data"] == {"k": "v"}
    assert loaded["published_date"] == "2016-01-01 09:00:00 +0000"
    assert not str(front).startswith("---")