"""JSON persistence for pydantic settings models.

Writes go through a `.tmp` sibling and a rename, and the previous file is
copied to `.bak` first. A broken file is reported as a ConfigurationError
subclass and left untouched on disk.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from huecycle.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless load/save helpers for pydantic models.

    Example:
        ```python
        config = PydanticPersistence.load_json_or_default(path, AppConfig)
        PydanticPersistence.save_json(config, path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If a value fails validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        name = model_type.__name__
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {name} from {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not raw.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"{name} in {path} failed validation: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {name} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write `data` to `path` as indented JSON.

        Parent directories are created. With `backup`, an existing file is
        copied to `<name>.bak` before it is replaced.

        Raises:
            OSError: If the file cannot be written
            ConfigurationError: If the model cannot be serialized
        """
        name = type(data).__name__
        try:
            payload = data.model_dump_json(indent=2)
        except ValueError as e:
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Cannot serialize {name}: {e}",
                recovery_hint="Check the configuration values",
            ) from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            if backup and path.exists():
                shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

            temp_path = path.with_suffix(path.suffix + ".tmp")
            try:
                temp_path.write_text(payload, encoding="utf-8")
                temp_path.replace(path)
            finally:
                temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Cannot write {name} to {path}: {e}")
            raise

        logger.debug(f"Saved {name} to {path}")

    @staticmethod
    def load_json_or_default(path: Path, model_type: type[M]) -> M:
        """
        Load `path`, or return `model_type()` when the file doesn't exist.

        The default is not written to disk. Errors in an existing file
        propagate.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return model_type()
