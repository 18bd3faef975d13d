"""Configuration management for Allot.

Reads configuration from ~/.config/allot.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    state_filename: str
    log_level: str
    log_dir: Path
    export_dir: Path

    @property
    def state_path(self) -> Path:
        """Get the full path of the persisted budget (data_dir/filename)."""
        return self.data_dir / self.state_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "allot"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "data",
            state_filename="budget.json",
            log_level="INFO",
            log_dir=base_dir / "logs",
            export_dir=base_dir / "exports",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "allot.toml"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override of the config file location.

    Returns:
        Config object with loaded or default values.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "allot"))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir / "data"))
    state_filename = storage_config.get("filename", "budget.json")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    export_config = data.get("export", {})
    export_dir = Path(export_config.get("export_dir", base_dir / "exports"))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        state_filename=state_filename,
        log_level=log_level,
        log_dir=log_dir,
        export_dir=export_dir,
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination TOML file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "storage": {
            "data_dir": str(config.data_dir),
            "filename": config.state_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "export": {
            "export_dir": str(config.export_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
