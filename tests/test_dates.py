from datetime import datetime

import pytest

from cinder.document import Document
from cinder.model.frontmatter import Frontmatter
from cinder.pagination.dates import create_dates_paginators


def make_doc(**pagination):
    front = Frontmatter.from_config(
        {"slug": "blog", "title": "Blog", "pagination": pagination}
    )
    return Document.create("", "blog.md", front)


POSTS = [
    {"title": "p1", "published_date": datetime(2020, 1, 5)},
    {"title": "p2", "published_date": datetime(2020, 2, 6)},
    {"title": "p3", "published_date": datetime(2021, 1, 7)},
    {"title": "undated"},
]


@pytest.fixture
def paginators():
    doc = make_doc(include="Dates")
    return create_dates_paginators(POSTS, doc, doc.front.pagination)


def test_root_lists_years(paginators):
    root = paginators[0]
    assert root.index_title is None
    assert [p.index_title for p in root.indexes] == [["2020"], ["2021"]]


def test_year_pages_sorted_desc(paginators):
    year = paginators[0].indexes[0]
    assert year.pages == [POSTS[1], POSTS[0]]


def test_months_zero_padded(paginators):
    year = paginators[0].indexes[0]
    assert [p.index_title for p in year.indexes] == [["2020", "01"], ["2020", "02"]]


def test_undated_posts_left_out(paginators):
    for p in paginators:
        assert POSTS[3] not in (p.pages or [])


def test_month_pages_match_dates(paginators):
    for p in paginators:
        if p.index_title is not None and len(p.index_title) == 2:
            year, month = p.index_title
            for post in p.pages:
                assert f"{post['published_date'].year}" == year
                assert f"{post['published_date'].month:02}" == month


def test_string_dates_parsed():
    doc = make_doc(include="Dates")
    posts = [{"published_date": "2022-03-04 10:00:00 +0000"}]
    paginators = create_dates_paginators(posts, doc, doc.front.pagination)
    assert paginators[0].indexes[0].index_title == ["2022"]
    assert paginators[0].indexes[0].pages == posts


def test_day_index():
    doc = make_doc(include="Dates", date_index=["Year", "Month", "Day"])
    paginators = create_dates_paginators(POSTS[:1], doc, doc.front.pagination)
    titles = [p.index_title for p in paginators]
    assert ["2020", "01", "05"] in titles


def test_no_dates_gives_only_root():
    doc = make_doc(include="Dates")
    paginators = create_dates_paginators([{"title": "x"}], doc, doc.front.pagination)
    assert len(paginators) == 1
    assert paginators[0].indexes is None