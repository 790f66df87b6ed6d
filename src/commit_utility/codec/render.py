"""Deterministic text rendering of decoded table commitments.

The layout follows the producer's pretty debug output: structs render as
``Name {`` blocks with one ``field: value,`` line per field, tuple variants as
``Name(`` blocks, sequences as ``[`` blocks and maps as ``{`` blocks, each
nested level indented by four spaces. Commitment payloads render as
lowercase hex.
"""

from __future__ import annotations

import unicodedata

from ..models import (
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnCommitments,
    ColumnKind,
    ColumnType,
    Commitment,
    Ident,
    TableCommitment,
)

INDENT = "    "

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}

_GRAPHEME_EXTEND_CATEGORIES = ("Mn", "Me")


def render_table_commitment(commitment: TableCommitment) -> str:
    """Render a table commitment as multi-line text.

    The result has no trailing newline and depends only on the value, so
    identical bytes always render identically.

    Args:
        commitment: Decoded table commitment

    Returns:
        Pretty-printed text exposing the full decoded structure
    """
    return _struct(
        "TableCommitment",
        [
            ("column_commitments", _render_column_commitments(commitment.column_commitments)),
            ("range", f"{commitment.range_start}..{commitment.range_end}"),
        ],
    )


def _render_column_commitments(columns: ColumnCommitments) -> str:
    return _struct(
        "ColumnCommitments",
        [
            ("commitments", _list([_render_commitment(c) for c in columns.commitments])),
            (
                "column_metadata",
                _map(
                    [
                        (_render_ident(entry.identifier), _render_metadata(entry.metadata))
                        for entry in columns.column_metadata
                    ]
                ),
            ),
        ],
    )


def _render_commitment(commitment: Commitment) -> str:
    return _tuple(type(commitment).type_name(), [f"0x{commitment.data.hex()}"])


def _render_ident(identifier: Ident) -> str:
    if identifier.quote_style is None:
        quote_style = "None"
    else:
        quote_style = _tuple("Some", [_debug_char(identifier.quote_style)])
    return _struct(
        "Ident",
        [("value", _debug_str(identifier.value)), ("quote_style", quote_style)],
    )


def _render_metadata(metadata: ColumnCommitmentMetadata) -> str:
    return _struct(
        "ColumnCommitmentMetadata",
        [
            ("column_type", _render_column_type(metadata.column_type)),
            ("bounds", _render_column_bounds(metadata.bounds)),
        ],
    )


def _render_column_type(column_type: ColumnType) -> str:
    if column_type.kind is ColumnKind.DECIMAL75:
        return _tuple(
            column_type.kind.value,
            [_tuple("Precision", [str(column_type.precision)]), str(column_type.scale)],
        )
    if column_type.kind is ColumnKind.TIMESTAMP_TZ:
        timezone = _struct("PoSQLTimeZone", [("offset", str(column_type.timezone_offset))])
        return _tuple(column_type.kind.value, [column_type.time_unit.value, timezone])
    return column_type.kind.value


def _render_column_bounds(column_bounds: ColumnBounds) -> str:
    if column_bounds.family is BoundsFamily.NO_ORDER:
        return column_bounds.family.value
    return _tuple(column_bounds.family.value, [_render_bounds(column_bounds.bounds)])


def _render_bounds(bounds: Bounds) -> str:
    if bounds.kind is BoundsKind.EMPTY:
        return bounds.kind.value
    inner = _struct("BoundsInner", [("min", str(bounds.min)), ("max", str(bounds.max))])
    return _tuple(bounds.kind.value, [inner])


def _indent(text: str) -> str:
    """Indent every line of text by one level."""
    return INDENT + text.replace("\n", "\n" + INDENT)


def _block(opening: str, items: list[str], closing: str) -> str:
    body = "".join(f"{_indent(item)},\n" for item in items)
    return f"{opening}\n{body}{closing}"


def _struct(name: str, fields: list[tuple[str, str]]) -> str:
    if not fields:
        return name
    return _block(f"{name} {{", [f"{key}: {value}" for key, value in fields], "}")


def _tuple(name: str, items: list[str]) -> str:
    if not items:
        return name
    return _block(f"{name}(", items, ")")


def _list(items: list[str]) -> str:
    if not items:
        return "[]"
    return _block("[", items, "]")


def _map(entries: list[tuple[str, str]]) -> str:
    if not entries:
        return "{}"
    return _block("{", [f"{key}: {value}" for key, value in entries], "}")


def _escape(ch: str, quote: str) -> str:
    if ch == quote:
        return "\\" + ch
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    # Combining marks are escaped even though they print
    if not ch.isprintable() or unicodedata.category(ch) in _GRAPHEME_EXTEND_CATEGORIES:
        return f"\\u{{{ord(ch):x}}}"
    return ch


def _debug_str(value: str) -> str:
    return '"' + "".join(_escape(ch, '"') for ch in value) + '"'


def _debug_char(value: str) -> str:
    return "'" + _escape(value, "'") + "'"
