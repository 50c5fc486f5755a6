"""
JSON file storage for any pydantic-serializable type
"""

import os
import tempfile
from pathlib import Path
from typing import Any, Generic, TypeVar
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from todo_tracker.config.constants import JSON_INDENT
from todo_tracker.utils.error_handler import PersistenceError
from todo_tracker.utils.logger import logger

T = TypeVar("T")


class JsonStorage(Generic[T]):
    """Loads and saves one value of type T as a pretty-printed JSON document"""

    def __init__(self, file_path: str | Path, data_type: Any):
        """
        Initialize storage

        Args:
            file_path: Path to the JSON file
            data_type: Type of the stored value (e.g. list[Task])
        """
        self.file_path = Path(file_path)
        self.adapter: TypeAdapter[T] = TypeAdapter(data_type)
        self.logger = logger

    def load(self, default: T) -> T:
        """
        Load value from file

        Args:
            default: Value returned when the file does not exist yet or holds JSON null

        Returns:
            Deserialized value

        Raises:
            PersistenceError: If the file exists but cannot be read or parsed
        """
        try:
            raw = self.file_path.read_bytes()
        except FileNotFoundError:
            self.logger.debug(f"{self.file_path} does not exist, starting empty")
            return default
        except OSError as e:
            raise PersistenceError(f"cannot read {self.file_path}: {e}") from e

        if raw.strip() == b"null":
            self.logger.debug(f"{self.file_path} holds null, starting empty")
            return default

        try:
            data = self.adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise PersistenceError(f"cannot parse {self.file_path}: {e}") from e

        self.logger.debug(f"Loaded {self.file_path}")
        return data

    def save(self, data: T) -> None:
        """
        Save value to file, replacing the previous content

        The document is written to a temporary file in the same directory
        and renamed over the target, so readers never see a partial file.

        Raises:
            PersistenceError: If serialization or writing fails
        """
        try:
            payload = self.adapter.dump_json(data, indent=JSON_INDENT)
        except Exception as e:
            raise PersistenceError(f"cannot serialize data for {self.file_path}: {e}") from e

        tmp_name = None
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.file_path.name}.", suffix=".tmp", dir=self.file_path.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.write(b"\n")
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.file_path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"cannot write {self.file_path}: {e}") from e

        self.logger.debug(f"Saved {self.file_path}")
