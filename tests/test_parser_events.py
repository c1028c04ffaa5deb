"""Tests for the PyYAML event source."""

import pytest
import yaml

from gstconf.parser import events as events_module
from gstconf.parser.errors import SourceError
from gstconf.parser.events import (
    ConfigEvent,
    EventKind,
    from_yaml_event,
    iter_yaml_events,
)


def test_event_kinds_for_simple_mapping():
    kinds = [e.kind for e in iter_yaml_events("a: 1\n")]
    assert kinds == [
        EventKind.STREAM_START,
        EventKind.DOCUMENT_START,
        EventKind.MAPPING_START,
        EventKind.SCALAR,
        EventKind.SCALAR,
        EventKind.MAPPING_END,
        EventKind.DOCUMENT_END,
        EventKind.STREAM_END,
    ]


def test_scalar_values_and_positions():
    scalars = [e for e in iter_yaml_events("a: 1\n") if e.kind is EventKind.SCALAR]
    assert scalars == [
        ConfigEvent(EventKind.SCALAR, "a", line=1, column=1),
        ConfigEvent(EventKind.SCALAR, "1", line=1, column=4),
    ]


def test_scalars_stay_text():
    """Values are not resolved to YAML types: conversion is the parser's job."""
    values = [
        e.value
        for e in iter_yaml_events("[true, 5, ~, 1.5]")
        if e.kind is EventKind.SCALAR
    ]
    assert values == ["true", "5", "~", "1.5"]


def test_alias_events_are_reported():
    kinds = [e.kind for e in iter_yaml_events("- &x a\n- *x\n")]
    assert EventKind.ALIAS in kinds


def test_accepts_bytes_and_files(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("a: b\n")
    with path.open("rb") as f:
        from_file = list(iter_yaml_events(f))
    assert from_file == list(iter_yaml_events(b"a: b\n"))


def test_malformed_yaml_raises_source_error():
    with pytest.raises(SourceError) as excinfo:
        list(iter_yaml_events("actions: [\n"))
    assert excinfo.value.line is not None
    assert isinstance(excinfo.value.__cause__, yaml.YAMLError)


def test_scanner_error_raises_source_error():
    with pytest.raises(SourceError, match="Malformed YAML"):
        list(iter_yaml_events('name: "unterminated\n'))


def test_from_yaml_event_without_mark():
    event = from_yaml_event(yaml.StreamEndEvent())
    assert event == ConfigEvent(EventKind.STREAM_END)


def test_str_shows_scalar_value():
    assert str(ConfigEvent(EventKind.SCALAR, "count")) == "scalar('count')"
    assert str(ConfigEvent(EventKind.MAPPING_END)) == "mapping-end"


def test_closing_source_disposes_yaml_generator(monkeypatch):
    """Closing the source early closes the underlying PyYAML generator."""
    closed = []

    def fake_parse(stream, Loader):
        try:
            yield yaml.StreamStartEvent()
            yield yaml.StreamEndEvent()
        finally:
            closed.append(True)

    monkeypatch.setattr(events_module.yaml, "parse", fake_parse)

    source = iter_yaml_events("ignored")
    assert next(source).kind is EventKind.STREAM_START
    source.close()
    assert closed == [True]
