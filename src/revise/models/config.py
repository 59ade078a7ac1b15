"""Configuration model for the revise command line tool."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckConfig(BaseModel):
    """Settings for checking and reporting on set files.

    Attributes:
        extension: File extension set files are expected to have
        color: Force colored reports on or off (None detects a terminal)
        verbose: Enable debug logging
        quiet: Only print errors
        max_reports: Print at most this many diagnostics per file
    """

    model_config = ConfigDict(extra="forbid")

    extension: str = Field(".set", description="Expected set file extension")
    color: bool | None = Field(None, description="Colored output (None = auto)")
    verbose: bool = Field(False, description="Enable debug logging")
    quiet: bool = Field(False, description="Only print errors")
    max_reports: int | None = Field(
        None, ge=1, description="Maximum diagnostics printed per file"
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate the extension is a dotted suffix.

        Args:
            v: The configured extension

        Returns:
            The extension with a leading dot

        Raises:
            ValueError: If the extension is empty or contains a path separator
        """
        v = v.strip()
        if not v or v == ".":
            raise ValueError("Extension cannot be empty")
        if "/" in v or "\\" in v:
            raise ValueError("Extension cannot contain path separators")
        return v if v.startswith(".") else f".{v}"
