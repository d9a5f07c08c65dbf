"""JSON and DOM parsing for the two inventory payloads."""

from __future__ import annotations

import json
from typing import Any, Sequence

from selectolax.parser import HTMLParser, Node

from ..errors import DecodeError
from ..models import Vehicle

# Cherry Picked rows are positional; column index per Vehicle attribute.
CHERRY_PICKED_COLUMNS: dict[str, int] = {
    "row": 0,
    "vehicle_number": 1,
    "year": 2,
    "make": 3,
    "model": 4,
    "color": 5,
    "description": 6,
    "engine_size": 7,
    "vin": 8,
    "mileage": 9,
}

# LKQ notes paragraphs are positional too: index -> (attribute, label prefix).
# Known fragility: a reordering on the site silently shifts these fields.
LKQ_NOTE_FIELDS: dict[int, tuple[str, str]] = {
    1: ("row", "Row: ROW "),
    2: ("vehicle_number", "Space: "),
    3: ("color", "Color: "),
    4: ("vin", "VIN: "),
}

LKQ_ROW_SELECTOR = "tr.pypvi_resultRow"
LKQ_NOTES_SELECTOR = "td.pypvi_make > div.pypvi_notes > p"


def _cell(row: Sequence[str], index: int) -> str:
    if index < len(row):
        return row[index]
    return ""


def extract_note_fields(paragraphs: Sequence[str]) -> dict[str, str]:
    """Map notes paragraphs to Vehicle attributes by position.

    Paragraphs at unmapped positions are ignored and a position missing from
    ``paragraphs`` leaves its attribute as an empty string.
    """

    fields = {name: "" for name, _prefix in LKQ_NOTE_FIELDS.values()}
    for index, (name, prefix) in LKQ_NOTE_FIELDS.items():
        if index >= len(paragraphs):
            continue
        fields[name] = paragraphs[index].replace(prefix, "").strip()
    return fields


def _text(node: Node | None) -> str:
    if node is None:
        return ""
    return node.text().strip()


class Parser:
    """Turn raw inventory payloads into Vehicle records."""

    def parse_json(self, payload: str) -> Any:
        try:
            return json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"malformed JSON payload: {exc}") from exc

    def parse_cherry_picked(self, payload: str, make: str, site_name: str) -> list[Vehicle]:
        rows = self.parse_json(payload)
        if not isinstance(rows, list):
            raise DecodeError("inventory payload is not an array")
        vehicles: list[Vehicle] = []
        for position, row in enumerate(rows):
            if not isinstance(row, list) or not all(isinstance(cell, str) for cell in row):
                raise DecodeError(f"inventory row {position} is not an array of strings")
            if _cell(row, CHERRY_PICKED_COLUMNS["make"]).lower() != make.lower():
                continue
            values = {name: _cell(row, index) for name, index in CHERRY_PICKED_COLUMNS.items()}
            vehicles.append(Vehicle(site=site_name, **values))
        return vehicles

    def parse_lkq(self, fragment: str, site_name: str) -> list[Vehicle]:
        # The response is bare <tr> rows; give them a table to live in.
        tree = HTMLParser(f"<table>{fragment}</table>")
        if tree.root is None:
            raise DecodeError("unable to parse inventory markup")
        vehicles: list[Vehicle] = []
        for row in tree.css(LKQ_ROW_SELECTOR):
            make_cell = row.css_first("td.pypvi_make")
            # Direct text only; the notes block is nested in the same cell.
            make = make_cell.text(deep=False).strip() if make_cell is not None else ""
            paragraphs = [p.text() for p in row.css(LKQ_NOTES_SELECTOR)]
            vehicles.append(
                Vehicle(
                    make=make,
                    model=_text(row.css_first("td.pypvi_model")),
                    year=_text(row.css_first("td.pypvi_year")),
                    description="Available On: " + _text(row.css_first("td.pypvi_date")),
                    site=site_name,
                    **extract_note_fields(paragraphs),
                )
            )
        return vehicles


__all__ = [
    "CHERRY_PICKED_COLUMNS",
    "LKQ_NOTE_FIELDS",
    "Parser",
    "extract_note_fields",
]
