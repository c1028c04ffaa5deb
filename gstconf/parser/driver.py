"""Event pump that runs the state machine over a configuration source.

Usage:
    from gstconf.parser import load_actions

    actions = load_actions("gst_single.conf")
    for action in actions:
        print(action.name, action.count)
"""

from collections.abc import Iterable
from pathlib import Path
from typing import IO

from gstconf.models.action_models import ActionRecord
from gstconf.parser.errors import IncompleteDocumentError
from gstconf.parser.events import ConfigEvent, iter_yaml_events
from gstconf.parser.machine import ActionStateMachine, TraceHook
from gstconf.parser.options import ParserOptions
from gstconf.utils.logger import Logger


def pump_events(
    machine: ActionStateMachine, events: Iterable[ConfigEvent]
) -> tuple[ActionRecord, ...]:
    """Feed events to ``machine`` until it stops.

    The event iterator is closed on every exit path, so a generator-backed
    source releases its resources even when parsing fails.

    Returns:
        The machine's records.

    Raises:
        GrammarError: If an event is rejected, or the source ends before Stop.
        SourceError: If the source cannot produce the next event.
    """
    iterator = iter(events)
    try:
        for event in iterator:
            machine.consume(event)
            if machine.finished:
                break
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    if not machine.finished:
        raise IncompleteDocumentError(machine.state)
    return machine.records


def parse_actions(
    stream: str | bytes | IO[str] | IO[bytes],
    options: ParserOptions | None = None,
    trace: TraceHook | None = None,
) -> list[ActionRecord]:
    """Parse an action configuration.

    Args:
        stream: YAML text or an open file object.
        options: Parser options. Defaults to ParserOptions.from_env().
        trace: Trace hook called after every transition. Overrides the
            logging hook selected by ``options.trace``. That hook writes
            through Logger, so it stays silent until Logger.configure()
            has run; embedders without logging set up should pass their
            own hook here.

    Returns:
        Action records in document order.

    Raises:
        SourceError: If the input is not well-formed YAML.
        GrammarError: If the YAML does not follow the action grammar.
    """
    if options is None:
        options = ParserOptions.from_env()

    machine = ActionStateMachine(
        strict=options.strict,
        trace=trace if trace is not None else options.trace_hook(),
    )
    return list(pump_events(machine, iter_yaml_events(stream)))


def load_actions(
    path: str | Path,
    options: ParserOptions | None = None,
    trace: TraceHook | None = None,
) -> list[ActionRecord]:
    """Parse the action configuration file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        SourceError: If the file is not well-formed YAML.
        GrammarError: If the YAML does not follow the action grammar.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Action config file not found: {path}")

    with path.open("rb") as f:
        actions = parse_actions(f, options, trace)

    Logger.debug_if_configured("parser", f"Parsed {len(actions)} action(s) from {path}")
    return actions
