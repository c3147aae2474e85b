"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Optional settings file, looked up in the working directory
CONFIG_FILE = "termkanban.yml"


class Settings(BaseSettings):
    """Application settings."""

    board_file: Path = Field(
        default=Path("board.json"),
        description="JSON file the board is loaded from and saved to",
    )

    backup_file: Path = Field(
        default=Path("backup_kanban.json"),
        description="JSON file written by the backup command",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = SettingsConfigDict(
        env_prefix="TERMKANBAN_",
        yaml_file=CONFIG_FILE,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # CLI args win over env vars, env vars over termkanban.yml
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))
