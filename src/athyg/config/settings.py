"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from athyg.schemas.registry import SchemaVersion

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoaderConfig(BaseModel):
    """Parsing and scheduling options for catalog loading."""

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default=",", description="Field separator character")
    encoding: str = Field(default="utf-8", description="Text encoding of catalog files")
    max_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Files parsed concurrently (1 = sequential)",
    )

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Ensure delimiter is a single character."""
        if len(v) != 1:
            msg = f"delimiter must be a single character, got: {v!r}"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class CatalogConfig(BaseModel):
    """Complete configuration for loading a set of catalog files."""

    model_config = ConfigDict(frozen=True)

    version: SchemaVersion = Field(description="Catalog version of all files")
    data_root: Path = Field(
        default=Path("."), description="Directory that relative file paths resolve against"
    )
    files: list[Path] = Field(min_length=1, description="Catalog files, in load order")
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> SchemaVersion:
        """Accept version names case-insensitively."""
        if isinstance(v, SchemaVersion):
            return v
        try:
            return SchemaVersion.coerce(str(v))
        except KeyError as e:
            raise ValueError(str(e)) from None

    def resolved_files(self) -> list[Path]:
        """Resolve configured files against data_root, keeping order."""
        return [path if path.is_absolute() else self.data_root / path for path in self.files]
