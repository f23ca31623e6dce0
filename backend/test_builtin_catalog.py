"""
Tests for the built-in pattern catalog and the process-wide instance
"""
from pattern_catalog.entries import Category
from pattern_catalog.patterns import (
    PATTERN_CATALOG,
    Catalog,
    CatalogQuery,
    build_catalog,
    builtin_entries,
    get_catalog,
    register_all_patterns,
    reset_catalog,
)


def test_builtin_catalog_is_consistent():
    catalog = build_catalog("")
    assert len(catalog) == len(PATTERN_CATALOG)
    assert list(catalog.validate_all()) == []


def test_every_category_is_populated():
    query = CatalogQuery(build_catalog(""))
    for category in Category:
        assert query.by_category(category), category


def test_builder_matches_reference_entry():
    builder = CatalogQuery(build_catalog("")).by_name("Builder")
    assert builder.category is Category.CREATIONAL
    assert builder.summary == "Separates construction from representation."


def test_catalogs_do_not_share_entries():
    first = Catalog()
    second = Catalog()
    register_all_patterns(first)
    register_all_patterns(second)

    first.amend("Observer", notes=["only in the first catalog"])
    assert "only in the first catalog" not in second.get("Observer").notes
    assert "only in the first catalog" not in [
        n for p in PATTERN_CATALOG for n in p.notes
    ]


def test_builtin_entries_are_fresh_copies():
    assert builtin_entries()[0] is not builtin_entries()[0]


def test_build_catalog_from_file(tmp_path):
    source = tmp_path / "mine.md"
    source.write_text("# Other\n\n## Pipes and Filters\n\nChains processing steps.\n")
    catalog = build_catalog(str(source))
    assert catalog.names() == ["Pipes and Filters"]


def test_global_catalog_is_cached():
    reset_catalog()
    try:
        assert get_catalog() is get_catalog()
        assert len(get_catalog()) == len(PATTERN_CATALOG)
    finally:
        reset_catalog()
