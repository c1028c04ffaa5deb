"""Event-driven parser for benchmark action configurations."""

from gstconf.parser.driver import load_actions, parse_actions, pump_events
from gstconf.parser.errors import (
    ConfigParseError,
    ConversionError,
    GrammarError,
    IncompleteDocumentError,
    ParserStoppedError,
    SourceError,
    UnknownKeyError,
)
from gstconf.parser.events import ConfigEvent, EventKind, iter_yaml_events
from gstconf.parser.machine import (
    TRANSITIONS,
    ActionStateMachine,
    Transition,
    TransitionTrace,
    transition,
)
from gstconf.parser.options import ParserOptions
from gstconf.parser.states import ParserState

__all__ = [
    "TRANSITIONS",
    "ActionStateMachine",
    "ConfigEvent",
    "ConfigParseError",
    "ConversionError",
    "EventKind",
    "GrammarError",
    "IncompleteDocumentError",
    "ParserOptions",
    "ParserState",
    "ParserStoppedError",
    "SourceError",
    "Transition",
    "TransitionTrace",
    "UnknownKeyError",
    "iter_yaml_events",
    "load_actions",
    "parse_actions",
    "pump_events",
    "transition",
]
