"""Parser configuration."""

from pydantic import BaseModel, Field

from gstconf.parser.machine import TraceHook, log_transition
from gstconf.utils.env import get_env

STRICT_ENV = "GSTCONF_STRICT"
DEBUG_ENV = "GSTCONF_DEBUG"


class ParserOptions(BaseModel):
    """Switches that change how a configuration is parsed."""

    strict: bool = Field(
        False,
        description=(
            "Reject malformed integer, decimal and boolean values instead of "
            "converting them to 0, 0.0 or false"
        ),
    )
    trace: bool = Field(
        False, description="Log every (state, event) transition at DEBUG level"
    )

    @classmethod
    def from_env(cls) -> "ParserOptions":
        """Build options from GSTCONF_STRICT and GSTCONF_DEBUG."""
        return cls(
            strict=get_env(STRICT_ENV, default=False, as_type=bool),
            trace=get_env(DEBUG_ENV, default=False, as_type=bool),
        )

    def trace_hook(self) -> TraceHook | None:
        return log_transition if self.trace else None
