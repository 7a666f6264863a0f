import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

DEFAULT_MANIFEST_NAME = "vimkeys.toml"
DEFAULT_STORE_PATH = ".vimkeys/keymaps.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StorageConfig:
    """Where imported keymaps are kept."""

    path: str = DEFAULT_STORE_PATH


@dataclass
class ImportConfig:
    """Import behaviour."""

    reject_on_diagnostics: bool = True  # Refuse to store when any statement failed


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class VimkeysManifest:
    """Contents of vimkeys.toml."""

    root: Path
    storage: StorageConfig = field(default_factory=StorageConfig)
    import_: ImportConfig = field(default_factory=ImportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def store_path(self) -> Path:
        """Store path, resolved relative to the manifest directory."""
        path = Path(self.storage.path).expanduser()
        if path.is_absolute():
            return path
        return self.root / path


def load_manifest(path: Path) -> VimkeysManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    storage_data = data.get("storage", {})
    import_data = data.get("import", {})
    logging_data = data.get("logging", {})

    store_path = storage_data.get("path", DEFAULT_STORE_PATH)
    if not isinstance(store_path, str):
        raise ConfigError(f"[storage] path must be a string in {path}")

    reject = import_data.get("reject_on_diagnostics", True)
    if not isinstance(reject, bool):
        raise ConfigError(f"[import] reject_on_diagnostics must be true or false in {path}")

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"[logging] level must be one of {', '.join(LOG_LEVELS)} in {path}")

    return VimkeysManifest(
        root=path.resolve().parent,
        storage=StorageConfig(path=store_path),
        import_=ImportConfig(reject_on_diagnostics=reject),
        logging=LoggingConfig(level=level),
    )


def load_manifest_or_default(path: Path) -> VimkeysManifest:
    """Load vimkeys.toml, falling back to defaults when the file does not exist."""
    if not path.exists():
        return VimkeysManifest(root=path.resolve().parent)
    return load_manifest(path)
