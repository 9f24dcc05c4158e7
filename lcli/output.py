"""Formatted output of command results as JSON, YAML or aligned tables."""

from __future__ import annotations

import dataclasses
import enum
import json
from datetime import datetime
from typing import Any, Iterable, Mapping, TextIO

import yaml


class Format(str, enum.Enum):
    """Output serialisation format."""

    JSON = "json"
    TABLE = "table"
    YAML = "yaml"


def _plain(value: Any) -> Any:
    """Turn dataclasses, enums and datetimes into JSON-compatible data."""
    if isinstance(value, enum.Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if f.metadata.get("omitempty") and not item:
                continue
            out[f.metadata.get("json", f.name)] = _plain(item)
        return out
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        pairs = ((str(_plain(k)), _plain(v)) for k, v in value.items())
        return dict(sorted(pairs, key=lambda kv: kv[0]))
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(item) for item in value]
    return value


class Table:
    """Tabular data rendered with aligned columns."""

    def __init__(self, *headers: str) -> None:
        self.headers: list[str] = list(headers)
        self.rows: list[list[str]] = []

    def add_row(self, *cols: str) -> None:
        """Append a row of column values."""
        self.rows.append(list(cols))

    def _widths(self) -> list[int]:
        widths = [len(h) for h in self.headers]
        for row in self.rows:
            for i, col in enumerate(row[: len(widths)]):
                widths[i] = max(widths[i], len(col))
        return widths

    @staticmethod
    def _line(cols: list[str], widths: list[int]) -> str:
        padded = list(cols) + [""] * (len(widths) - len(cols))
        return "  ".join(f"{val:<{width}}" for val, width in zip(padded, widths)) + "\n"

    def render(self, stream: TextIO) -> None:
        """Write the table, a dashed separator under the header, to stream."""
        widths = self._widths()
        stream.write(self._line(self.headers, widths))
        stream.write("  ".join("-" * width for width in widths) + "\n")
        for row in self.rows:
            stream.write(self._line(row, widths))


class Printer:
    """Writes structured data to a stream in a configured format."""

    def __init__(self, stream: TextIO, format: Format | str) -> None:
        self._stream = stream
        self._format = format

    @property
    def format(self) -> Format | str:
        """The configured output format."""
        return self._format

    def print(self, value: Any) -> None:
        """Write value in the configured format; unknown formats fall back to JSON."""
        if self._format == Format.YAML:
            self.print_yaml(value)
        elif self._format == Format.TABLE:
            raise ValueError("use print_table for table output")
        else:
            self.print_json(value)

    def print_json(self, value: Any) -> None:
        """Write value as JSON indented by two spaces."""
        try:
            text = json.dumps(_plain(value), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"marshal json: {exc}") from exc
        self._stream.write(text + "\n")

    def print_yaml(self, value: Any) -> None:
        """Write value as YAML."""
        try:
            text = yaml.safe_dump(_plain(value), sort_keys=False, default_flow_style=False, allow_unicode=True)
        except yaml.YAMLError as exc:
            raise ValueError(f"marshal yaml: {exc}") from exc
        self._stream.write(text)

    def print_table(self, headers: Iterable[str], rows: Iterable[Iterable[str]]) -> None:
        """Write an aligned table of the given headers and rows."""
        table = Table(*headers)
        for row in rows:
            table.add_row(*row)
        table.render(self._stream)


def parse_format(text: str) -> Format:
    """Convert a name into a Format, raising ValueError for unknown names."""
    try:
        return Format(text)
    except ValueError:
        raise ValueError(f'unknown format: "{text}" (use json, table, or yaml)') from None