"""Process-wide default configuration.

The global config is meant for process start-up: one writer loads or replaces
it, everyone else reads. Only the reference swap is locked; accessors read
whatever config is current at call time.
"""

import threading
from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from .config import Config
from .core.exceptions import GlobalNotLoadedError, StoreNilError, ValidationError
from .core.types import ChangeMap, FileMode
from .validators import Validator

_global_config: Optional[Config] = None
_global_lock = threading.Lock()


def load_global(path: Union[str, Path]) -> Config:
    """Load a configuration file and make it the global config.

    The current global config is kept if loading fails.

    Raises:
        LoadError: If the file can't be loaded
    """
    config = Config.read(path)
    set_global(config)
    logger.info(f"Loaded global configuration from: {path}")
    return config


def get_global() -> Optional[Config]:
    """Return the global config, or None if none is loaded."""
    return _global_config


def set_global(config: Optional[Config]) -> None:
    """Replace the global config, discarding the old one."""
    global _global_config

    with _global_lock:
        _global_config = config


def reset_global() -> None:
    """Drop the global config."""
    set_global(None)


def reload() -> ChangeMap:
    """Reload the global config from its file.

    Raises:
        GlobalNotLoadedError: No global config is loaded
        LoadError: If the file can't be loaded
    """
    config = _global_config
    if config is None:
        raise GlobalNotLoadedError()

    changes = config.reload()
    logger.info(f"Reloaded global configuration from: {config.file}")
    return changes


def validate(validators: Sequence[Validator]) -> List[ValidationError]:
    """Validate the global config, see Config.validate."""
    config = _global_config
    if config is None:
        return [StoreNilError("Global config struct is nil")]
    return config.validate(validators)


def get_str(key: str, default: str = "") -> str:
    config = _global_config
    return default if config is None else config.get_str(key, default)


def get_int(key: str, default: int = 0) -> int:
    config = _global_config
    return default if config is None else config.get_int(key, default)


def get_float(key: str, default: float = 0.0) -> float:
    config = _global_config
    return default if config is None else config.get_float(key, default)


def get_bool(key: str, default: bool = False) -> bool:
    config = _global_config
    return default if config is None else config.get_bool(key, default)


def get_mode(key: str, default: int = 0) -> FileMode:
    config = _global_config
    return FileMode(default) if config is None else config.get_mode(key, default)


def has_section(section: str) -> bool:
    config = _global_config
    return config is not None and config.has_section(section)


def has_prop(key: str) -> bool:
    config = _global_config
    return config is not None and config.has_prop(key)


def sections() -> List[str]:
    config = _global_config
    return [] if config is None else config.sections()


def props(section: str) -> List[str]:
    config = _global_config
    return [] if config is None else config.props(section)
