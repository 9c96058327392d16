"""
Runtime settings for the directory simulator.

The defaults reproduce the legacy transcript format exactly. Changing the
column values changes the output layout; changing the behavior flags opts
into the alternative error handling described on each field.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Settings(BaseModel):
    """
    Immutable configuration shared by the filesystem, executor and renderers.

    Params:
        root_name: Name given to the root directory
        separator: Path separator used in headers and move targets
        column_width: Column stop for directory listings
        line_width: Maximum length of a directory listing line
        first_arg_column: 1-based echo column of the first argument
        second_arg_column: 1-based echo column of the second argument
        arg_offset: 0-based offset where single-argument commands start their argument
        abort_on_fault: Stop the run on command faults instead of reporting them
        reject_cyclic_moves: Refuse moves of a directory below itself
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root_name: str = Field(default="root", description="Name of the root directory")
    separator: str = Field(default="\\", description="Path separator")
    column_width: int = Field(default=8, gt=0, description="Listing column stop")
    line_width: int = Field(default=80, gt=0, description="Listing maximum line length")
    first_arg_column: int = Field(
        default=18, gt=1, description="Echo column of the first argument"
    )
    second_arg_column: int = Field(
        default=26, gt=1, description="Echo column of the second argument"
    )
    arg_offset: int = Field(
        default=8, ge=0, description="Offset of single-argument command arguments"
    )
    abort_on_fault: bool = Field(
        default=True,
        description="Abort the whole run on unknown commands and arity errors",
    )
    reject_cyclic_moves: bool = Field(
        default=False,
        description="Reject moving a directory into itself or its descendants",
    )

    @field_validator("root_name")
    @classmethod
    def _check_root_name(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("root_name must be non-empty and contain no whitespace")
        return value

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError("separator must be a single non-whitespace character")
        return value

    @model_validator(mode="after")
    def _check_echo_columns(self) -> "Settings":
        if self.second_arg_column <= self.first_arg_column:
            raise ValueError("second_arg_column must be greater than first_arg_column")
        return self


DEFAULT_SETTINGS = Settings()
