"""Listing and showing database statistics (metrics) in JSON or text form."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional, Protocol, Sequence, TextIO


class ReturnCode(enum.IntEnum):
    """Exit status of a command."""

    OK = 0
    ERR = 1


class MetricsError(Exception):
    """Base class of errors raised while producing metrics output."""


class UnsupportedFormatError(MetricsError):
    """The requested output format cannot be produced."""


class ConnectionFailedError(MetricsError, RuntimeError):
    """The database could not be reached."""

    def __init__(self, database_name: str) -> None:
        super().__init__(f"could not connect to database with name '{database_name}'")
        self.database_name = database_name


@dataclass
class MetricsElement:
    """One element of an array-valued metric, labelled by its attributes."""

    value: float
    attributes: Mapping[str, str] = field(default_factory=dict)


@dataclass
class MetricsItem:
    """A metric: its key, description, and either a scalar value or an array."""

    key: str
    description: str
    value: float = 0.0
    array: Optional[Sequence[MetricsElement]] = None

    def is_array(self) -> bool:
        """Return True when the metric holds an array of elements."""
        return self.array is not None


class Monitor(Protocol):
    def start(self) -> None: ...

    def finish(self, success: bool) -> None: ...


Fetch = Callable[[], Optional[Iterable[MetricsItem]]]


def _list_json(items: Sequence[MetricsItem]) -> str:
    entries = [f'  "{item.key}": "{item.description}"' for item in items]
    body = "".join(f"{entry}\n" for entry in (",\n".join(entries).split("\n") if entries else []))
    return "{\n" + body + "}\n"


def _list_text(items: Sequence[MetricsItem]) -> str:
    key_max = max((len(item.key) for item in items), default=0)
    description_max = max((len(item.description) for item in items), default=0)
    lines = []
    prev_key = ""
    for item in items:
        if item.key != prev_key:
            lines.append(f"{item.key:>{key_max}} : {item.description:<{description_max}}\n")
            prev_key = item.key
    return "".join(lines)


def format_list(items: Iterable[MetricsItem], output_format: str) -> str:
    """Render the metric keys and descriptions in the given format."""
    items = list(items)
    if output_format == "json":
        return _list_json(items)
    if output_format == "text":
        return _list_text(items)
    raise UnsupportedFormatError(f"format {output_format} is not supported")


def _element_value(value: float) -> str:
    return f"{value:.0f}" if value > 1.0 else f"{value:.6f}"


def _scalar_value(value: float) -> str:
    return f"{value:.6f}" if value - math.trunc(value) > 0.0 else f"{value:.0f}"


def _show_item(item: MetricsItem) -> str:
    if not item.is_array():
        return f'  "{item.key}": {_scalar_value(item.value)}'
    elements = list(item.array or ())
    parts = [f'  "{item.key}": [\n']
    for position, element in enumerate(elements, start=1):
        parts.append("    {\n")
        parts.extend(f'      "{name}": "{text}",\n' for name, text in element.attributes.items())
        parts.append(f'      "value": {_element_value(element.value)}\n')
        parts.append("    },\n" if position < len(elements) else "    }\n")
    parts.append("  ]")
    return "".join(parts)


def format_show(items: Iterable[MetricsItem], output_format: str) -> str:
    """Render the metric values; only the JSON format is available."""
    items = list(items)
    if output_format == "json":
        return "{\n" + ",\n".join(_show_item(item) for item in items) + "\n}\n"
    if output_format == "text":
        raise UnsupportedFormatError("human readable format has not been supported")
    raise UnsupportedFormatError(f"format {output_format} is not supported")


def _run(
    formatter: Callable[[Iterable[MetricsItem], str], str],
    fetch: Fetch,
    output_format: str,
    out: Optional[TextIO],
    err: Optional[TextIO],
    monitor: Optional[Monitor],
) -> ReturnCode:
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    if monitor is not None:
        monitor.start()
    try:
        items = fetch()
        if items is None:
            err.write("could not receive a valid response\n")
        else:
            out.write(formatter(items, output_format))
            if monitor is not None:
                monitor.finish(True)
            return ReturnCode.OK
    except ConnectionFailedError as exc:
        err.write(f"{exc}\n")
    except UnsupportedFormatError as exc:
        err.write(f"{exc}\n")
    if monitor is not None:
        monitor.finish(False)
    return ReturnCode.ERR


def run_list(
    fetch: Fetch,
    output_format: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    monitor: Optional[Monitor] = None,
) -> ReturnCode:
    """Fetch the metrics and write their keys and descriptions."""
    return _run(format_list, fetch, output_format, out, err, monitor)


def run_show(
    fetch: Fetch,
    output_format: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    monitor: Optional[Monitor] = None,
) -> ReturnCode:
    """Fetch the metrics and write their values."""
    return _run(format_show, fetch, output_format, out, err, monitor)