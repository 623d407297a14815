"""
Pydantic models for reader configuration.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class ReaderConfig(BaseModel):
    """Settings for reading simulation output files."""
    default_value: float = Field(
        0.0,
        description="Value substituted for empty fields and rows a column has no sample for"
    )
    encoding: str = Field("utf-8", description="Encoding of output and sidecar files")
    sidecar_suffix: str = Field(
        ".columns",
        description="Suffix appended to the output path to locate the column-name sidecar file"
    )
    progress_interval: int = Field(
        10000,
        description="Log progress every N rows during bulk parse (0 = never)",
        ge=0
    )
    time_names: List[str] = Field(
        default_factory=lambda: ["t", "TIME", "$t"],
        description="Names recognized as the time column, lowest preference first"
    )

    @field_validator('sidecar_suffix')
    @classmethod
    def validate_sidecar_suffix(cls, suffix):
        """Ensure the sidecar suffix extends the file name."""
        if not suffix.startswith("."):
            raise ValueError(f"sidecar_suffix must start with '.', got '{suffix}'")
        return suffix

    @field_validator('time_names')
    @classmethod
    def validate_time_names(cls, names):
        """Ensure time names are present and unique."""
        if not names:
            raise ValueError("time_names must contain at least one name")
        duplicates = [name for name in set(names) if names.count(name) > 1]
        if duplicates:
            raise ValueError(f"Duplicate time names: {', '.join(sorted(duplicates))}")
        return names

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ReaderConfig":
        """
        Create ReaderConfig from dictionary with validation.

        Args:
            config_dict: Configuration dictionary (loaded from JSON)

        Returns:
            Validated ReaderConfig instance

        Raises:
            ValidationError: If configuration is invalid
        """
        return cls.model_validate(config_dict)

    @classmethod
    def from_json_file(cls, config_path: str) -> "ReaderConfig":
        """
        Load and validate configuration from JSON file.

        Raises:
            ValidationError: If configuration is invalid
            FileNotFoundError: If file doesn't exist
        """
        import json
        from pathlib import Path

        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path, encoding='utf-8') as f:
            config_dict = json.load(f)

        return cls.from_dict(config_dict)
