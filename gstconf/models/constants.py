"""Constants for gstconf models and the configuration grammar."""

from enum import StrEnum, auto

SECTION_KEYWORD = "actions"
"""Top-level key whose value is the action list."""

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


class ActionKey(StrEnum):
    """Keys accepted inside one action mapping of the configuration."""

    NAME = "name"
    MODULE = "module"
    DEVICE = "device"
    PARALLEL = "parallel"
    COUNT = "count"
    DURATION = "duration"
    COPY_MATRIX = "copy_matrix"
    TARGET_STRESS = "target_stress"
    MATRIX_SIZE_A = "matrix_size_a"
    MATRIX_SIZE_B = "matrix_size_b"
    MATRIX_SIZE_C = "matrix_size_c"
    OPS_TYPE = "ops_type"
    LOG_INTERVAL = "log_interval"


class ScalarKind(StrEnum):
    """How the text of a scalar value is converted into a record field."""

    STRING = auto()
    INTEGER = auto()
    DECIMAL = auto()
    BOOLEAN = auto()
