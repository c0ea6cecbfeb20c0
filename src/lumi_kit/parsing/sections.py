"""Line scanner for the loosely structured YAML-like documents lumi-kit reads.

Parsing happens in two phases:

1. Segmentation: an unindented `identifier:` line opens a top-level section.
   Its span is every following line up to the next such header or the end of
   the document.
2. Field extraction: inside a span, `key: value` lines become scalars and a
   bare `key:` line followed by `- value` lines becomes a list.

Nothing here raises on malformed input. Unknown or irregular lines are
skipped, so a broken entry degrades to defaults instead of aborting a run.

Scalar values are truncated at their first colon, including a colon inside a
quoted value (`title: "Docs: Helper"` yields `Docs`). Callers that need the
full quoted text read it from the raw document instead.
"""

import re
from dataclasses import dataclass

SECTION_HEADER_PATTERN = re.compile(r"^([A-Za-z_][\w-]*):(?:\s|$)")
KEY_PATTERN = re.compile(r"^\s*([A-Za-z_][\w-]*):(.*)$")
LIST_ITEM_PATTERN = re.compile(r"^(\s*)-(?:\s+(.*))?$")

QUOTE_CHARS = "\"'"

Span = tuple[str, ...]


@dataclass(frozen=True)
class SectionFields:
    """Scalars and lists found inside one span."""

    scalars: dict[str, str]
    lists: dict[str, tuple[str, ...]]

    def scalar(self, key: str) -> str | None:
        return self.scalars.get(key)

    def items(self, key: str) -> tuple[str, ...]:
        return self.lists.get(key, ())


def strip_quotes(value: str) -> str:
    """Strip surrounding whitespace and one pair of wrapping quotes.

    Quotes inside the value are kept. A lone opening quote, as left behind by
    colon truncation, is dropped.
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        value = value[1:-1]
    elif value and value[0] in QUOTE_CHARS:
        value = value[1:]
    return value.strip()


def normalize_scalar(raw: str) -> str:
    """Turn the text after `key:` into a scalar value.

    Truncates at the first colon, then strips quotes.
    """
    head, _, _ = raw.partition(":")
    return strip_quotes(head)


def _is_ignorable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def indentation(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def split_sections(text: str) -> dict[str, Span]:
    """Segment a document into top-level section spans.

    A repeated header does not reopen its section: the first span wins and the
    lines under the repeat are discarded.
    """
    sections: dict[str, Span] = {}
    current_name: str | None = None
    current_lines: list[str] = []

    def close() -> None:
        if current_name is not None and current_name not in sections:
            sections[current_name] = tuple(current_lines)

    for line in text.splitlines():
        match = SECTION_HEADER_PATTERN.match(line)
        if match:
            close()
            current_name = match.group(1)
            current_lines = []
            continue
        if current_name is not None:
            current_lines.append(line)

    close()
    return sections


def section_span(text: str, name: str) -> Span:
    """Return the span of section `name`, or an empty span if it is absent."""
    return split_sections(text).get(name, ())


def extract_fields(span: Span) -> SectionFields:
    """Classify the lines of a span as scalars or list items.

    The first occurrence of a key wins, whether it was a scalar or a list.
    """
    scalars: dict[str, str] = {}
    lists: dict[str, list[str]] = {}
    seen: set[str] = set()
    open_list: str | None = None

    for line in span:
        if _is_ignorable(line):
            continue

        item = LIST_ITEM_PATTERN.match(line)
        if item:
            if open_list is not None:
                lists.setdefault(open_list, []).append(strip_quotes(item.group(2) or ""))
            continue

        key_match = KEY_PATTERN.match(line)
        if key_match is None:
            open_list = None
            continue

        key, rest = key_match.group(1), key_match.group(2)
        if key in seen:
            open_list = None
            continue
        seen.add(key)

        if rest.strip():
            scalars[key] = normalize_scalar(rest)
            open_list = None
        else:
            open_list = key

    return SectionFields(
        scalars=scalars,
        lists={key: tuple(values) for key, values in lists.items()},
    )


def split_list_blocks(span: Span) -> list[Span]:
    """Split a span into the blocks of its outermost list.

    Each block starts at a `- ` item at the shallowest list indentation. The
    leading dash of that first line is replaced by a space so the block can be
    fed to extract_fields. Lines before the first item are dropped.
    """
    item_indents = [
        len(match.group(1))
        for line in span
        if (match := LIST_ITEM_PATTERN.match(line)) is not None
    ]
    if not item_indents:
        return []
    list_indent = min(item_indents)

    blocks: list[list[str]] = []
    for line in span:
        match = LIST_ITEM_PATTERN.match(line)
        if match is not None and len(match.group(1)) == list_indent:
            blocks.append([line[:list_indent] + " " + line[list_indent + 1 :]])
        elif blocks:
            blocks[-1].append(line)

    return [tuple(block) for block in blocks]
