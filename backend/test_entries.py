"""
Tests for the pattern entry model and its validation
"""
import pytest

from pattern_catalog.entries import (
    Category,
    EntryValidationError,
    ErrorKind,
    PatternEntry,
    validate_entry,
)


def test_category_parse_accepts_any_case():
    assert Category.parse("creational") is Category.CREATIONAL
    assert Category.parse("  Behavioral ") is Category.BEHAVIORAL
    assert Category.parse(Category.OTHER) is Category.OTHER


def test_category_parse_rejects_unknown():
    assert Category.parse("Architectural") is None
    assert Category.parse(3) is None


def test_string_category_is_coerced(builder):
    entry = PatternEntry(name="Adapter", category="structural", summary="Converts interfaces.")
    assert entry.category is Category.STRUCTURAL
    assert entry.category_label == "Structural"


def test_valid_entry(builder):
    result = validate_entry(builder)
    assert result.is_valid
    assert result.errors == []


def test_empty_name_and_summary():
    entry = PatternEntry(name="  ", category="Creational", summary="")
    result = entry.validate()
    assert not result.is_valid
    assert result.kinds == [ErrorKind.EMPTY_FIELD, ErrorKind.EMPTY_FIELD]


def test_unknown_category_is_kept_and_reported():
    entry = PatternEntry(name="Saga", category="Distributed", summary="Long transactions.")
    assert entry.category == "Distributed"
    assert entry.validate().kinds == [ErrorKind.INVALID_CATEGORY]


def test_identity_fields_are_immutable(builder):
    with pytest.raises(AttributeError):
        builder.name = "Director"
    with pytest.raises(AttributeError):
        builder.category = Category.STRUCTURAL
    with pytest.raises(AttributeError):
        builder.summary = "changed"


def test_amend_appends_in_order(builder):
    builder.amend(notes=["second note"], applicability=["Immutable results"])
    assert builder.notes == ["Often fluent", "second note"]
    assert builder.applicability[-1] == "Immutable results"


def test_amend_with_blank_item_changes_nothing(builder):
    with pytest.raises(EntryValidationError) as exc:
        builder.amend(notes=["fine"], known_uses=[" "])
    assert exc.value.kind is ErrorKind.EMPTY_FIELD
    assert builder.notes == ["Often fluent"]
    assert builder.known_uses == ["Query builders"]


def test_list_drift_is_reported(builder):
    builder.notes.append("")
    result = builder.validate()
    assert result.kinds == [ErrorKind.EMPTY_FIELD]
    assert result.errors[0].field == "notes"


def test_lists_are_copied_on_construction():
    uses = ["a"]
    entry = PatternEntry(name="X", category="Other", summary="x", known_uses=uses)
    uses.append("b")
    assert entry.known_uses == ["a"]


def test_text_is_stripped_and_collapsed():
    entry = PatternEntry(
        name=" Builder\n",
        category="Creational",
        summary="Separates construction\n  from representation. ",
        notes=["Often\nfluent"],
        tags=[" construction "],
        related_patterns={"Composite\n"},
    )
    assert entry.name == "Builder"
    assert entry.summary == "Separates construction from representation."
    assert entry.notes == ["Often fluent"]
    assert entry.tags == ("construction",)
    assert entry.related_patterns == {"Composite"}


def test_heading_like_summary_is_malformed():
    for summary in ["# Heading", "### Section", "```js", "~~~"]:
        entry = PatternEntry(name="X", category="Other", summary=summary)
        assert entry.validate().kinds == [ErrorKind.MALFORMED_RECORD], summary

    assert PatternEntry(name="X", category="Other", summary="#hashtag").validate().is_valid


def test_non_string_tags_and_references_are_malformed():
    entry = PatternEntry(name="X", category="Other", summary="x",
                         tags=[None], related_patterns={3})
    result = entry.validate()
    assert result.kinds == [ErrorKind.MALFORMED_RECORD, ErrorKind.MALFORMED_RECORD]
    assert [e.field for e in result.errors] == ["tags", "related_patterns"]


def test_amend_with_bare_string_adds_one_item(builder):
    builder.amend(notes="Beware of deep hierarchies")
    assert builder.notes == ["Often fluent", "Beware of deep hierarchies"]


def test_amend_rejects_non_string_items(builder):
    with pytest.raises(EntryValidationError) as exc:
        builder.amend(applicability=[42])
    assert exc.value.kind is ErrorKind.MALFORMED_RECORD
    assert builder.applicability == ["Complex objects assembled step by step"]


def test_tags_and_references_are_immutable(builder):
    with pytest.raises(AttributeError):
        builder.tags = ["other"]
    with pytest.raises(AttributeError):
        builder.related_patterns = {"Visitor"}
    with pytest.raises(AttributeError):
        builder.tags.append("other")
    with pytest.raises(AttributeError):
        builder.related_patterns.add("Visitor")
