"""
Tests for the read-only query layer
"""
import pytest

from pattern_catalog.entries import Category, EntryValidationError, ErrorKind
from pattern_catalog.patterns import Catalog, CatalogQuery, by_tag, search


def names(entries):
    return [e.name for e in entries]


def test_by_name_is_case_sensitive(small_catalog):
    query = CatalogQuery(small_catalog)
    assert query.by_name("Builder").name == "Builder"
    assert query.by_name("builder") is None


def test_by_category_in_insertion_order(small_catalog):
    query = CatalogQuery(small_catalog)
    assert names(query.by_category("Creational")) == ["Builder", "Singleton"]
    assert names(query.by_category(Category.BEHAVIORAL)) == ["Observer"]


def test_by_category_empty_is_not_an_error(small_catalog):
    assert CatalogQuery(small_catalog).by_category(Category.OTHER) == []


def test_by_category_unknown_raises(small_catalog):
    with pytest.raises(EntryValidationError) as exc:
        CatalogQuery(small_catalog).by_category("Architectural")
    assert exc.value.kind is ErrorKind.INVALID_CATEGORY


def test_search_empty_returns_everything_in_order(small_catalog):
    assert names(search(small_catalog, "")) == ["Builder", "Composite", "Observer", "Singleton"]


def test_search_matches_name_and_summary_ignoring_case(small_catalog):
    assert names(search(small_catalog, "BUILD")) == ["Builder"]
    assert names(search(small_catalog, "instance")) == ["Singleton"]
    assert names(search(small_catalog, "o")) == ["Builder", "Composite", "Observer", "Singleton"]
    assert search(small_catalog, "zzz") == []


def test_by_tag(small_catalog):
    assert names(by_tag(small_catalog, "TREE")) == ["Composite"]
    assert by_tag(small_catalog, "unknown") == []
    small_catalog.remove("Composite")
    assert by_tag(small_catalog, "tree") == []


def test_queries_do_not_mutate(small_catalog):
    before = small_catalog.names()
    result = search(small_catalog, "")
    result.clear()
    assert small_catalog.names() == before


def test_results_are_restartable(small_catalog):
    result = CatalogQuery(small_catalog).by_category("Creational")
    assert names(result) == names(result)


def test_empty_catalog():
    query = CatalogQuery(Catalog())
    assert query.search("") == []
    assert query.by_name("Builder") is None
