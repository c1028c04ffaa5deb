"""Markup events consumed by the action state machine.

PyYAML is the event source. Its events are converted into small frozen
ConfigEvent values so the state machine never touches PyYAML objects, and
the PyYAML loader is disposed as soon as iteration stops.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import IO

import yaml  # type: ignore[import-untyped, unused-ignore]

from gstconf.parser.errors import SourceError


class EventKind(StrEnum):
    """Kinds of events emitted by the YAML layer."""

    STREAM_START = "stream-start"
    STREAM_END = "stream-end"
    DOCUMENT_START = "document-start"
    DOCUMENT_END = "document-end"
    MAPPING_START = "mapping-start"
    MAPPING_END = "mapping-end"
    SEQUENCE_START = "sequence-start"
    SEQUENCE_END = "sequence-end"
    SCALAR = "scalar"
    ALIAS = "alias"


@dataclass(frozen=True, slots=True)
class ConfigEvent:
    """One event: its kind, scalar text, and 1-based source position."""

    kind: EventKind
    value: str | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.kind is EventKind.SCALAR:
            return f"{self.kind.value}({self.value!r})"
        return self.kind.value


_YAML_EVENT_KINDS: dict[type[yaml.Event], EventKind] = {
    yaml.StreamStartEvent: EventKind.STREAM_START,
    yaml.StreamEndEvent: EventKind.STREAM_END,
    yaml.DocumentStartEvent: EventKind.DOCUMENT_START,
    yaml.DocumentEndEvent: EventKind.DOCUMENT_END,
    yaml.MappingStartEvent: EventKind.MAPPING_START,
    yaml.MappingEndEvent: EventKind.MAPPING_END,
    yaml.SequenceStartEvent: EventKind.SEQUENCE_START,
    yaml.SequenceEndEvent: EventKind.SEQUENCE_END,
    yaml.ScalarEvent: EventKind.SCALAR,
    yaml.AliasEvent: EventKind.ALIAS,
}


def from_yaml_event(event: yaml.Event) -> ConfigEvent:
    """Convert a PyYAML event into a ConfigEvent.

    Raises:
        SourceError: If PyYAML produced an event type with no mapping.
    """
    kind = _YAML_EVENT_KINDS.get(type(event))
    if kind is None:
        raise SourceError(f"Unsupported YAML event: {type(event).__name__}")

    mark = event.start_mark
    line = mark.line + 1 if mark is not None else None
    column = mark.column + 1 if mark is not None else None
    value = event.value if kind is EventKind.SCALAR else None
    return ConfigEvent(kind=kind, value=value, line=line, column=column)


def iter_yaml_events(
    stream: str | bytes | IO[str] | IO[bytes],
) -> Iterator[ConfigEvent]:
    """Yield ConfigEvents for a YAML stream, one at a time.

    Args:
        stream: YAML text or an open text/binary file object.

    Raises:
        SourceError: If the YAML cannot be scanned or parsed.
    """
    raw_events = yaml.parse(stream, Loader=yaml.SafeLoader)
    try:
        while True:
            try:
                raw = next(raw_events)
            except StopIteration:
                return
            except yaml.MarkedYAMLError as e:
                mark = e.problem_mark
                raise SourceError(
                    f"Malformed YAML: {e.problem or e}",
                    mark.line + 1 if mark is not None else None,
                    mark.column + 1 if mark is not None else None,
                ) from e
            except yaml.YAMLError as e:
                raise SourceError(f"Malformed YAML: {e}") from e

            event = from_yaml_event(raw)
            del raw
            yield event
    finally:
        raw_events.close()
