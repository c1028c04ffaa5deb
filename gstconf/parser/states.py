"""Parser states and the keyword tables that drive field selection."""

from dataclasses import dataclass
from enum import Enum

from gstconf.models.constants import ActionKey, ScalarKind


class ParserState(Enum):
    """Closed set of states of the action state machine."""

    START = "Start"
    STREAM = "Stream"
    DOCUMENT = "Document"
    SECTION = "Section"
    ACTION_LIST = "ActionList"
    ACTION_VALUES = "ActionValues"
    ACTION_KEY = "ActionKey"

    # One state per scalar field of an action
    NAME = "Name"
    DEVICES = "Devices"
    MODULE_NAME = "ModuleName"
    PARALLEL = "Parallel"
    COUNT = "Count"
    DURATION = "Duration"
    COPY_MATRIX = "CopyMatrix"
    TARGET_STRESS = "TargetStress"
    SIZE_A = "SizeA"
    SIZE_B = "SizeB"
    SIZE_C = "SizeC"
    OPS_TYPE = "OpsType"
    LOG_INTERVAL = "LogInterval"

    STOP = "Stop"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldSpec:
    """Where a field state stores its scalar, and how it converts it."""

    attribute: str
    kind: ScalarKind


KEYWORD_STATES: dict[str, ParserState] = {
    ActionKey.NAME: ParserState.NAME,
    ActionKey.MODULE: ParserState.MODULE_NAME,
    ActionKey.DEVICE: ParserState.DEVICES,
    ActionKey.PARALLEL: ParserState.PARALLEL,
    ActionKey.COUNT: ParserState.COUNT,
    ActionKey.DURATION: ParserState.DURATION,
    ActionKey.COPY_MATRIX: ParserState.COPY_MATRIX,
    ActionKey.TARGET_STRESS: ParserState.TARGET_STRESS,
    ActionKey.MATRIX_SIZE_A: ParserState.SIZE_A,
    ActionKey.MATRIX_SIZE_B: ParserState.SIZE_B,
    ActionKey.MATRIX_SIZE_C: ParserState.SIZE_C,
    ActionKey.OPS_TYPE: ParserState.OPS_TYPE,
    ActionKey.LOG_INTERVAL: ParserState.LOG_INTERVAL,
}

FIELD_SPECS: dict[ParserState, FieldSpec] = {
    ParserState.NAME: FieldSpec("name", ScalarKind.STRING),
    ParserState.MODULE_NAME: FieldSpec("module_name", ScalarKind.STRING),
    ParserState.DEVICES: FieldSpec("devices", ScalarKind.STRING),
    ParserState.PARALLEL: FieldSpec("parallel", ScalarKind.BOOLEAN),
    ParserState.COUNT: FieldSpec("count", ScalarKind.INTEGER),
    ParserState.DURATION: FieldSpec("duration", ScalarKind.INTEGER),
    ParserState.COPY_MATRIX: FieldSpec("copy_matrix", ScalarKind.BOOLEAN),
    ParserState.TARGET_STRESS: FieldSpec("target_stress", ScalarKind.DECIMAL),
    ParserState.SIZE_A: FieldSpec("matrix_size_a", ScalarKind.INTEGER),
    ParserState.SIZE_B: FieldSpec("matrix_size_b", ScalarKind.INTEGER),
    ParserState.SIZE_C: FieldSpec("matrix_size_c", ScalarKind.INTEGER),
    ParserState.OPS_TYPE: FieldSpec("ops_type", ScalarKind.STRING),
    ParserState.LOG_INTERVAL: FieldSpec("log_interval", ScalarKind.INTEGER),
}
