"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator

from huecycle.utils.persistence import PydanticPersistence

DEFAULT_HOME = Path.home() / ".huecycle"


class CycleConfig(BaseModel):
    """Settings for one color cycling session."""

    cycles: int = Field(default=10, ge=1, description="Number of colors to show per session")
    interval: float = Field(default=1.0, gt=0, description="Seconds between color changes")
    include_label: bool = Field(default=False, description="Render the hex value as a label")
    max_retries: int | None = Field(
        default=None,
        ge=1,
        description=(
            "Give up after this many consecutive duplicate draws (None = retry forever). "
            "Only matters in nearly exhausted color spaces."
        ),
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible color sequences (None = random)",
    )


class AppConfig(BaseModel):
    """Application configuration and settings."""

    cycle: CycleConfig = Field(
        default_factory=CycleConfig,
        description="Default cycle session settings",
    )

    log_dir: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "logs",
        description="Directory for rotating log files",
    )

    @field_validator("log_dir")
    @classmethod
    def expand_log_dir(cls, path: Path) -> Path:
        """Allow `~` in the configured log directory."""
        return path.expanduser()

    @field_serializer("log_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @staticmethod
    def default_path() -> Path:
        """Default config file location (~/.huecycle/config.json)."""
        return DEFAULT_HOME / "config.json"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.huecycle/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = cls.default_path()

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = self.default_path()

        PydanticPersistence.save_json(self, path)
