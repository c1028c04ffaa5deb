"""Exceptions raised while turning a configuration into action records.

Every fatal parse problem derives from ConfigParseError so callers can
handle "the configuration is bad" with one except clause. Using a state
machine after it stopped is a programming error and raises
ParserStoppedError instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gstconf.models.constants import ScalarKind
    from gstconf.parser.events import ConfigEvent
    from gstconf.parser.states import ParserState


def _location(line: int | None, column: int | None) -> str:
    if line is None:
        return ""
    if column is None:
        return f" (line {line})"
    return f" (line {line}, column {column})"


class ConfigParseError(Exception):
    """Base exception for configuration parse failures."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(f"{message}{_location(line, column)}")


class SourceError(ConfigParseError):
    """Raised when the YAML layer cannot tokenize the input."""

    pass


class GrammarError(ConfigParseError):
    """Raised when an event is not valid in the current parser state."""

    def __init__(
        self,
        state: ParserState,
        event: ConfigEvent | None,
        message: str | None = None,
    ) -> None:
        self.state = state
        self.event = event
        if message is None:
            kind = event.kind.value if event is not None else "end of input"
            message = f"Unexpected event {kind} in state {state.value}"
        line = event.line if event is not None else None
        column = event.column if event is not None else None
        super().__init__(message, line, column)


class UnknownKeyError(GrammarError):
    """Raised when a mapping key is not one the grammar knows."""

    def __init__(self, state: ParserState, event: ConfigEvent) -> None:
        self.keyword = event.value
        super().__init__(
            state, event, f"Unexpected key '{event.value}' in state {state.value}"
        )


class ConversionError(GrammarError):
    """Raised in strict mode when scalar text does not fit its field."""

    def __init__(
        self,
        state: ParserState,
        event: ConfigEvent,
        field: str,
        kind: ScalarKind,
    ) -> None:
        self.field = field
        self.kind = kind
        super().__init__(
            state,
            event,
            f"Invalid {kind.value} '{event.value}' for {field} in state {state.value}",
        )


class IncompleteDocumentError(GrammarError):
    """Raised when the event source runs out before the stream ends."""

    def __init__(self, state: ParserState) -> None:
        super().__init__(
            state, None, f"Event stream ended early in state {state.value}"
        )


class ParserStoppedError(RuntimeError):
    """Raised when events are fed to a machine that has already stopped."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"State machine no longer accepts events: {reason}")
