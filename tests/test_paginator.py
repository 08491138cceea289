import pytest

from cinder.document import Document
from cinder.model.frontmatter import Frontmatter
from cinder.pagination.core import interpret_permalink
from cinder.pagination.paginator import Paginator, create_all_paginators


def make_doc(**pagination):
    front = Frontmatter.from_config(
        {"slug": "blog", "title": "Blog", "pagination": pagination}
    )
    return Document.create("", "blog.md", front)


def make_posts(n):
    return [{"title": f"post {i}", "weight": i} for i in range(n)]


@pytest.fixture
def setup():
    doc = make_doc(include="All", per_page=2)
    items = make_posts(5)
    paginators = create_all_paginators(items, doc, doc.front.pagination, None)
    return doc, items, paginators


def test_chunks_cover_all_posts_in_order(setup):
    _, items, paginators = setup
    assert [post for p in paginators for post in p.pages] == items
    assert all(len(p.pages) <= 2 for p in paginators)
    assert len(paginators) == 3


def test_totals(setup):
    _, items, paginators = setup
    assert all(p.total_indexes == len(paginators) for p in paginators)
    assert all(p.total_pages == len(items) for p in paginators)


def test_indexes_numbered_from_one(setup):
    _, _, paginators = setup
    assert [p.index for p in paginators] == list(range(1, len(paginators) + 1))


def test_permalinks(setup):
    doc, _, paginators = setup
    cfg = doc.front.pagination
    assert paginators[0].index_permalink == doc.url_path
    for p in paginators:
        assert p.first_index_permalink == doc.url_path
        assert p.index_permalink == interpret_permalink(cfg, doc, p.index, None)
        assert p.last_index_permalink == paginators[-1].index_permalink


def test_previous_and_next_links(setup):
    _, _, paginators = setup
    assert paginators[0].previous_index_permalink is None
    assert paginators[-1].next_index_permalink is None
    for a, b in zip(paginators, paginators[1:]):
        assert a.next_index_permalink == b.index_permalink
        assert b.previous_index_permalink == a.index_permalink
        assert a.next_index == b.index
        assert b.previous_index == a.index


def test_to_object_omits_missing_links(setup):
    _, items, paginators = setup
    obj = paginators[0].to_object()
    assert "previous_index" not in obj
    assert "previous_index_permalink" not in obj
    assert "index_title" not in obj
    assert obj["next_index"] == 2
    assert obj["pages"] == items[:2]


def test_default_to_object():
    assert Paginator().to_object() == {
        "index": 0,
        "index_permalink": "",
        "first_index_permalink": "",
        "last_index_permalink": "",
        "total_indexes": 0,
        "total_pages": 0,
    }


def test_to_object_nests_indexes():
    child = Paginator(index_title="x")
    parent = Paginator(indexes=[child])
    obj = parent.to_object()
    assert obj["indexes"] == [child.to_object()]
    assert obj["indexes"][0]["index_title"] == "x"
    assert "pages" not in obj


def test_index_title_used_in_permalink():
    doc = make_doc(include="All", per_page=2)
    cfg = doc.front.pagination
    paginators = create_all_paginators(make_posts(3), doc, cfg, "Rust Lang")
    assert paginators[0].index_title == "Rust Lang"
    assert paginators[0].index_permalink == interpret_permalink(cfg, doc, 1, "Rust Lang")
    assert paginators[0].index_permalink.endswith("rust-lang")


def test_single_page_has_no_neighbours():
    doc = make_doc(include="All")
    p = Paginator()
    p.set_previous_next_info(1, 1, doc, doc.front.pagination, None)
    assert p.previous_index_permalink is None
    assert p.next_index_permalink is None


def test_empty_posts_give_no_paginators():
    doc = make_doc(include="All")
    assert create_all_paginators([], doc, doc.front.pagination, None) == []


def test_non_positive_per_page_rejected():
    doc = make_doc(include="All")
    cfg = doc.front.pagination
    cfg.per_page = 0
    with pytest.raises(ValueError):
        create_all_paginators(make_posts(2), doc, cfg, None)