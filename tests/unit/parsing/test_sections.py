"""Tests for the two-phase section scanner."""

from lumi_kit.parsing.sections import (
    extract_fields,
    normalize_scalar,
    section_span,
    split_list_blocks,
    split_sections,
    strip_quotes,
)


def test_split_sections_spans_run_to_next_header() -> None:
    """Test each span covers the lines between its header and the next."""
    text = "metadata:\n  name: A\npersona:\n  role: B\n  identity: C\n"

    sections = split_sections(text)

    assert sections["metadata"] == ("  name: A",)
    assert sections["persona"] == ("  role: B", "  identity: C")


def test_indented_keys_do_not_open_sections() -> None:
    """Test only unindented identifier lines are section headers."""
    text = "metadata:\n  persona:\n  name: A\n"

    sections = split_sections(text)

    assert list(sections) == ["metadata"]


def test_absent_section_has_empty_span() -> None:
    """Test a missing section yields an empty span."""
    assert section_span("metadata:\n  name: A\n", "menu") == ()


def test_repeated_header_keeps_first_span() -> None:
    """Test a second header with the same name does not replace the first span."""
    text = "persona:\n  role: First\npersona:\n  role: Second\n"

    assert section_span(text, "persona") == ("  role: First",)


def test_split_sections_does_not_mutate_input() -> None:
    """Test segmentation leaves the input text untouched."""
    text = "metadata:\n  name: A\n"
    original = str(text)

    split_sections(text)

    assert text == original


def test_extract_fields_scalars_strip_quotes() -> None:
    """Test scalar values have single and double quotes stripped."""
    fields = extract_fields(("  name: \"Docs Helper\"", "  icon: '📚'", "  role: plain"))

    assert fields.scalar("name") == "Docs Helper"
    assert fields.scalar("icon") == "📚"
    assert fields.scalar("role") == "plain"


def test_inner_quotes_next_to_wrapping_quotes_are_kept() -> None:
    """Test only the wrapping pair is removed from scalars and list items."""
    fields = extract_fields(
        (
            "  identity: \"Writes 'docs'\"",
            "  principles:",
            "    - \"Writes 'docs'\"",
            "    - 'Say \"hi\"'",
        )
    )

    assert fields.scalar("identity") == "Writes 'docs'"
    assert fields.items("principles") == ("Writes 'docs'", 'Say "hi"')


def test_mismatched_quotes_are_not_a_pair() -> None:
    """Test a trailing quote of a different kind stays part of the value."""
    assert strip_quotes(" \"Bob's' ") == "Bob's'"
    assert strip_quotes("it's") == "it's"
    assert strip_quotes("\"") == ""


def test_extract_fields_list_items() -> None:
    """Test a bare key followed by dash lines yields an ordered list."""
    fields = extract_fields(
        (
            "  principles:",
            "    - \"Be concise\"",
            "    - 'Cite sources'",
            "    - Plain item",
            "  role: After",
        )
    )

    assert fields.items("principles") == ("Be concise", "Cite sources", "Plain item")
    assert fields.scalar("role") == "After"


def test_extract_fields_first_occurrence_wins() -> None:
    """Test duplicate keys are ignored after the first."""
    fields = extract_fields(
        (
            "  role: First",
            "  role: Second",
            "  principles:",
            "    - one",
            "  principles:",
            "    - two",
        )
    )

    assert fields.scalar("role") == "First"
    assert fields.items("principles") == ("one",)


def test_extract_fields_skips_blank_and_comment_lines() -> None:
    """Test blank and comment lines inside a list do not end it."""
    fields = extract_fields(("  principles:", "", "    # note", "    - kept"))

    assert fields.items("principles") == ("kept",)


def test_quoted_colon_is_truncated() -> None:
    """Test the accepted limitation: values are cut at the first colon."""
    assert normalize_scalar(' "Docs: Helper"') == "Docs"
    assert extract_fields(('  title: "Docs: Helper"',)).scalar("title") == "Docs"


def test_split_list_blocks_on_outermost_items() -> None:
    """Test blocks start at the shallowest dash items only."""
    span = (
        "  - code: core",
        "    name: Core",
        "    tags:",
        "      - nested",
        "  - code: qa",
    )

    blocks = split_list_blocks(span)

    assert len(blocks) == 2
    assert blocks[0][0] == "    code: core"
    assert "      - nested" in blocks[0]
    assert blocks[1] == ("    code: qa",)


def test_split_list_blocks_without_items() -> None:
    """Test a span without list items has no blocks."""
    assert split_list_blocks(("  key: value",)) == []
