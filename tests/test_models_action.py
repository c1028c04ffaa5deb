"""Tests for the ActionRecord model."""

import pytest
from pydantic import ValidationError

from gstconf.models.action_models import ActionRecord


def test_defaults():
    """Only name is required; everything else has a zero value."""
    record = ActionRecord(name="a")
    assert record.model_dump() == {
        "name": "a",
        "module_name": "",
        "devices": "",
        "count": 0,
        "ops_type": "",
        "target_stress": 0.0,
        "duration": 0,
        "matrix_size_a": 0,
        "matrix_size_b": 0,
        "matrix_size_c": 0,
        "log_interval": 0,
        "parallel": False,
        "copy_matrix": False,
    }


def test_name_required():
    with pytest.raises(ValidationError):
        ActionRecord()


def test_record_is_frozen():
    record = ActionRecord(name="a", count=1)
    with pytest.raises(ValidationError):
        record.count = 2
    assert record.count == 1


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        ActionRecord(name="a", colour="red")


def test_matrix_dims():
    record = ActionRecord(name="a", matrix_size_a=1, matrix_size_b=2, matrix_size_c=3)
    assert record.matrix_dims == (1, 2, 3)
