"""Pydantic models for parsed benchmark actions."""

from pydantic import BaseModel, ConfigDict, Field


class ActionRecord(BaseModel):
    """One benchmark action descriptor read from the configuration.

    Records are frozen: the parser builds every field before the record is
    appended to the output list, and nothing edits it afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Action identifier")
    module_name: str = Field("", description="Target module (e.g., 'gemm')")
    devices: str = Field("", description="Device selector (e.g., 'all', '0,1')")
    count: int = Field(0, description="Repetition count")
    ops_type: str = Field("", description="Operation kind (e.g., 'sgemm', 'dgemm')")
    target_stress: float = Field(0.0, description="Stress intensity target")
    duration: int = Field(0, description="Run duration")
    matrix_size_a: int = Field(0, description="First matrix dimension")
    matrix_size_b: int = Field(0, description="Second matrix dimension")
    matrix_size_c: int = Field(0, description="Third matrix dimension")
    log_interval: int = Field(0, description="Logging cadence")
    parallel: bool = Field(False, description="Run on all selected devices at once")
    copy_matrix: bool = Field(False, description="Copy matrices to the device per run")

    @property
    def matrix_dims(self) -> tuple[int, int, int]:
        """Matrix sizes as an (a, b, c) tuple."""
        return (self.matrix_size_a, self.matrix_size_b, self.matrix_size_c)
