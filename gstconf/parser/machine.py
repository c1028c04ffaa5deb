"""Grammar-driven state machine that turns YAML events into action records.

The grammar is a fixed table keyed by ``(state, event kind)``. Each cell is
a handler that receives the current in-progress record (the draft) and
returns a Transition: the next state, the next draft, and the record that
was completed by this event, if any. Drafts are never modified in place.

Typical accepted event sequence (the table is the authority)::

    STREAM-START
      DOCUMENT-START
        MAPPING-START "actions"
          SEQUENCE-START
            MAPPING-START (key scalar)* MAPPING-END
            ...
          SEQUENCE-END
        MAPPING-END
      DOCUMENT-END
    STREAM-END
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from gstconf.models.action_models import ActionRecord
from gstconf.models.constants import SECTION_KEYWORD, ActionKey
from gstconf.parser.convert import ScalarConversionError, convert_scalar
from gstconf.parser.errors import (
    ConversionError,
    GrammarError,
    ParserStoppedError,
    UnknownKeyError,
)
from gstconf.parser.events import ConfigEvent, EventKind
from gstconf.parser.states import FIELD_SPECS, KEYWORD_STATES, ParserState
from gstconf.utils.logger import Logger

Draft = Mapping[str, Any]


@dataclass(frozen=True)
class Transition:
    """Result of applying one event."""

    state: ParserState
    draft: Draft = field(default_factory=dict)
    committed: ActionRecord | None = None


@dataclass(frozen=True)
class TransitionTrace:
    """What a trace hook sees for each event.

    ``after`` is None when the event was rejected.
    """

    before: ParserState
    event: ConfigEvent
    after: ParserState | None


Handler = Callable[[ParserState, ConfigEvent, Draft, bool], Transition]
TraceHook = Callable[[TransitionTrace], None]


def _goto(target: ParserState) -> Handler:
    def handler(
        state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
    ) -> Transition:
        return Transition(target, draft)

    return handler


def _enter_section(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
) -> Transition:
    if event.value != SECTION_KEYWORD:
        raise UnknownKeyError(state, event)
    return Transition(ParserState.ACTION_LIST, draft)


def _begin_action(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
) -> Transition:
    return Transition(ParserState.ACTION_KEY, {})


def _select_field(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
) -> Transition:
    target = KEYWORD_STATES.get(event.value or "")
    if target is None:
        raise UnknownKeyError(state, event)
    return Transition(target, draft)


def _commit_action(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
) -> Transition:
    if "name" not in draft:
        raise GrammarError(
            state,
            event,
            f"Action closed without a '{ActionKey.NAME}' key in state {state}",
        )
    return Transition(ParserState.ACTION_VALUES, {}, ActionRecord(**draft))


def _store_field(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool
) -> Transition:
    field_spec = FIELD_SPECS[state]
    try:
        value = convert_scalar(event.value or "", field_spec.kind, strict)
    except ScalarConversionError as e:
        raise ConversionError(
            state, event, field_spec.attribute, field_spec.kind
        ) from e
    return Transition(ParserState.ACTION_KEY, {**draft, field_spec.attribute: value})


TRANSITIONS: dict[tuple[ParserState, EventKind], Handler] = {
    (ParserState.START, EventKind.STREAM_START): _goto(ParserState.STREAM),
    (ParserState.STREAM, EventKind.DOCUMENT_START): _goto(ParserState.DOCUMENT),
    (ParserState.STREAM, EventKind.STREAM_END): _goto(ParserState.STOP),
    (ParserState.DOCUMENT, EventKind.MAPPING_START): _goto(ParserState.SECTION),
    (ParserState.DOCUMENT, EventKind.DOCUMENT_END): _goto(ParserState.STREAM),
    (ParserState.SECTION, EventKind.SCALAR): _enter_section,
    (ParserState.SECTION, EventKind.DOCUMENT_END): _goto(ParserState.STREAM),
    (ParserState.ACTION_LIST, EventKind.SEQUENCE_START): _goto(
        ParserState.ACTION_VALUES
    ),
    (ParserState.ACTION_LIST, EventKind.MAPPING_END): _goto(ParserState.SECTION),
    (ParserState.ACTION_VALUES, EventKind.MAPPING_START): _begin_action,
    (ParserState.ACTION_VALUES, EventKind.SEQUENCE_END): _goto(
        ParserState.ACTION_LIST
    ),
    (ParserState.ACTION_KEY, EventKind.SCALAR): _select_field,
    (ParserState.ACTION_KEY, EventKind.MAPPING_END): _commit_action,
}
TRANSITIONS.update(
    {(field_state, EventKind.SCALAR): _store_field for field_state in FIELD_SPECS}
)


def transition(
    state: ParserState, event: ConfigEvent, draft: Draft, strict: bool = False
) -> Transition:
    """Apply one event to ``state`` and ``draft``.

    Args:
        state: Current parser state.
        event: Incoming event.
        draft: Fields collected so far for the action being read.
        strict: Reject malformed numbers and booleans instead of defaulting.

    Returns:
        The resulting Transition.

    Raises:
        GrammarError: If the event is not valid in ``state``, including
            UnknownKeyError and (strict mode) ConversionError.
    """
    handler = TRANSITIONS.get((state, event.kind))
    if handler is None:
        raise GrammarError(state, event)
    return handler(state, event, draft, strict)


def log_transition(trace: TransitionTrace) -> None:
    """Trace hook that writes each transition to the debug log."""
    after = trace.after if trace.after is not None else "rejected"
    Logger.debug_if_configured(
        "parser.trace",
        f"state={trace.before} event={trace.event} -> {after}",
    )


class ActionStateMachine:
    """Stateful wrapper around ``transition`` that collects records.

    Example:
        >>> machine = ActionStateMachine()
        >>> for event in iter_yaml_events(text):
        ...     machine.consume(event)
        ...     if machine.finished:
        ...         break
        >>> machine.records
    """

    def __init__(self, strict: bool = False, trace: TraceHook | None = None) -> None:
        self.strict = strict
        self._trace = trace
        self._state = ParserState.START
        self._draft: Draft = {}
        self._records: list[ActionRecord] = []
        self._error: GrammarError | None = None

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def records(self) -> tuple[ActionRecord, ...]:
        """Completed records in document order."""
        return tuple(self._records)

    @property
    def finished(self) -> bool:
        return self._state is ParserState.STOP

    @property
    def error(self) -> GrammarError | None:
        """The grammar error that stopped this machine, if any."""
        return self._error

    def consume(self, event: ConfigEvent) -> ParserState:
        """Feed one event and return the new state.

        Raises:
            GrammarError: If the event is not valid in the current state.
            ParserStoppedError: If the machine already reached Stop or
                failed on an earlier event.
        """
        if self._state is ParserState.STOP:
            raise ParserStoppedError("stream already ended")
        if self._error is not None:
            raise ParserStoppedError(f"an earlier event failed: {self._error}")

        before = self._state
        try:
            step = transition(before, event, self._draft, self.strict)
        except GrammarError as e:
            self._error = e
            if self._trace is not None:
                self._trace(TransitionTrace(before, event, None))
            raise

        self._state = step.state
        self._draft = step.draft
        if step.committed is not None:
            self._records.append(step.committed)
            Logger.debug_if_configured(
                "parser",
                f"Committed action '{step.committed.name}' (#{len(self._records)})",
            )

        if self._trace is not None:
            self._trace(TransitionTrace(before, event, step.state))
        return self._state
