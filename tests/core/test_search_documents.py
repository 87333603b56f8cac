"""Document search tests — pure predicate filtering over stored documents.

Tests cover:
    - Empty request matches everything
    - Title prefix: OR within the list, null title never matches
    - Content substring: OR within the list, null content never matches
    - Author id membership, null author never matches
    - Created range: inclusive bounds, open-ended bounds
    - AND across dimensions
    - Input order preserved
    - active_dimensions reports only constraining criteria

Design Decisions:
    - Pure core function: no store, no fixtures, just documents in → documents out
"""

from datetime import datetime, timedelta, timezone

from docstore.core.domain_types import MatchDimension
from docstore.core.search_documents import (
    active_dimensions,
    filter_documents,
    matches_author_ids,
    matches_contents,
    matches_created_range,
    matches_title_prefixes,
)
from docstore.schemas.document import Author, Document, SearchRequest

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_doc(
    title: str | None = "Untitled",
    content: str | None = "body",
    author_id: str | None = "a1",
    created: datetime | None = T0,
    doc_id: str = "d",
) -> Document:
    author = Author(id=author_id, name=f"Author {author_id}") if author_id else None
    return Document(
        id=doc_id, title=title, content=content, author=author, created=created,
    )


def _titles(docs: list[Document]) -> list[str | None]:
    return [d.title for d in docs]


# --- Empty request ------------------------------------------------------------

def test_empty_request_matches_all():
    docs = [_make_doc(title="A"), _make_doc(title="B"), _make_doc(title="C")]
    assert filter_documents(docs, SearchRequest()) == docs


def test_empty_lists_are_unconstrained():
    docs = [_make_doc(content=None, author_id=None)]
    request = SearchRequest(title_prefixes=[], contains_contents=[], author_ids=[])
    assert filter_documents(docs, request) == docs


# --- Title prefix -------------------------------------------------------------

def test_title_prefix_selects_matching_titles():
    docs = [
        _make_doc(title="Alpha Report"),
        _make_doc(title="Alpha Notes"),
        _make_doc(title="Beta Report"),
    ]
    result = filter_documents(docs, SearchRequest(title_prefixes=["Alpha"]))
    assert _titles(result) == ["Alpha Report", "Alpha Notes"]


def test_title_prefix_any_of_several():
    docs = [_make_doc(title="Alpha"), _make_doc(title="Beta"), _make_doc(title="Gamma")]
    result = filter_documents(docs, SearchRequest(title_prefixes=["Gam", "Al"]))
    assert _titles(result) == ["Alpha", "Gamma"]


def test_title_prefix_is_case_sensitive():
    assert not matches_title_prefixes(_make_doc(title="Alpha"), ["alpha"])


def test_null_title_never_matches_prefix():
    assert not matches_title_prefixes(_make_doc(title=None), ["A"])
    assert matches_title_prefixes(_make_doc(title=None), None)


# --- Content substring --------------------------------------------------------

def test_content_any_substring_matches():
    docs = [
        _make_doc(title="fox", content="the quick fox"),
        _make_doc(title="dog", content="a lazy dog"),
        _make_doc(title="none", content=None),
    ]
    result = filter_documents(docs, SearchRequest(contains_contents=["quick", "dog"]))
    assert _titles(result) == ["fox", "dog"]


def test_null_content_never_matches_substring():
    assert not matches_contents(_make_doc(content=None), [""])
    assert matches_contents(_make_doc(content=None), [])


# --- Author ids ---------------------------------------------------------------

def test_author_id_membership():
    docs = [
        _make_doc(title="one", author_id="a1"),
        _make_doc(title="two", author_id="a2"),
        _make_doc(title="three", author_id="a3"),
    ]
    result = filter_documents(docs, SearchRequest(author_ids=["a3", "a1"]))
    assert _titles(result) == ["one", "three"]


def test_null_author_never_matches_author_ids():
    assert not matches_author_ids(_make_doc(author_id=None), ["a1"])
    assert matches_author_ids(_make_doc(author_id=None), None)


# --- Created range ------------------------------------------------------------

def test_created_range_bounds_are_inclusive():
    start, end = T0, T0 + timedelta(days=1)
    assert matches_created_range(_make_doc(created=start), start, end)
    assert matches_created_range(_make_doc(created=end), start, end)


def test_created_before_from_is_excluded():
    doc = _make_doc(created=T0 - timedelta(microseconds=1))
    assert not matches_created_range(doc, T0, None)


def test_created_after_to_is_excluded():
    doc = _make_doc(created=T0 + timedelta(microseconds=1))
    assert not matches_created_range(doc, None, T0)


def test_open_ended_ranges():
    doc = _make_doc(created=T0)
    assert matches_created_range(doc, T0 - timedelta(days=365), None)
    assert matches_created_range(doc, None, T0 + timedelta(days=365))
    assert matches_created_range(doc, None, None)


def test_range_with_naive_bounds_compares_as_utc():
    docs = [_make_doc(created=T0)]
    request = SearchRequest(created_from=datetime(2024, 3, 1, 12, 0))
    assert filter_documents(docs, request) == docs


# --- Combined -----------------------------------------------------------------

def test_dimensions_are_anded():
    docs = [
        _make_doc(title="Alpha 1", content="quick", author_id="a1", created=T0),
        _make_doc(title="Alpha 2", content="quick", author_id="a2", created=T0),
        _make_doc(title="Alpha 3", content="slow", author_id="a1", created=T0),
        _make_doc(title="Beta 4", content="quick", author_id="a1", created=T0),
        _make_doc(
            title="Alpha 5", content="quick", author_id="a1",
            created=T0 + timedelta(days=2),
        ),
    ]
    request = SearchRequest(
        title_prefixes=["Alpha"],
        contains_contents=["quick"],
        author_ids=["a1"],
        created_from=T0,
        created_to=T0 + timedelta(days=1),
    )
    assert _titles(filter_documents(docs, request)) == ["Alpha 1"]


def test_filter_preserves_input_order():
    docs = [_make_doc(title=t) for t in ("c", "a", "b")]
    assert _titles(filter_documents(docs, SearchRequest())) == ["c", "a", "b"]


def test_filter_accepts_any_iterable():
    docs = (_make_doc(title=t) for t in ("x", "y"))
    assert _titles(filter_documents(docs, SearchRequest(title_prefixes=["y"]))) == ["y"]


# --- active_dimensions --------------------------------------------------------

def test_active_dimensions_empty_request():
    assert active_dimensions(SearchRequest(title_prefixes=[])) == []


def test_active_dimensions_reports_each_constraint():
    request = SearchRequest(
        title_prefixes=["A"], contains_contents=["b"], author_ids=["c"], created_to=T0,
    )
    assert active_dimensions(request) == [
        MatchDimension.TITLE_PREFIX,
        MatchDimension.CONTENT,
        MatchDimension.AUTHOR,
        MatchDimension.CREATED_RANGE,
    ]
