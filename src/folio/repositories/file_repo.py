"""File-backed state repository."""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from folio.core.exceptions import ParseError, StorageError
from folio.domain.models import PortfolioState
from folio.repositories.codec import parse, serialize

logger = logging.getLogger(__name__)


class StateRepository(Protocol):
    """Interface for loading and saving whole portfolio states."""

    def save(self, state: PortfolioState, path: Union[str, Path]) -> Path:
        """Persist state, returning the path written."""
        ...

    def load(self, path: Union[str, Path]) -> PortfolioState:
        """Read a previously saved state."""
        ...


class FileStateRepository:
    """
    Stores portfolio state as a single UTF-8 text file.

    Reads and writes are whole-file operations. Relative paths are resolved
    against base_dir when one is given.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self._base_dir = base_dir

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve path against the repository base directory."""
        candidate = Path(path).expanduser()
        if self._base_dir is not None and not candidate.is_absolute():
            return self._base_dir / candidate
        return candidate

    def save(self, state: PortfolioState, path: Union[str, Path]) -> Path:
        file_path = self.resolve(path)
        # Encode before opening so a failure never truncates an existing file
        try:
            data = serialize(state).encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageError(str(file_path), f"text is not encodable as UTF-8 ({e.reason})") from e
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except OSError as e:
            raise StorageError(str(file_path), e.strerror or str(e)) from e

        logger.info("Saved portfolio (%d transactions) to %s", len(state.txns), file_path)
        return file_path

    def load(self, path: Union[str, Path]) -> PortfolioState:
        file_path = self.resolve(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(str(file_path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"{file_path} is not valid UTF-8 text") from e

        state = parse(text)
        logger.info("Loaded portfolio (%d transactions) from %s", len(state.txns), file_path)
        return state
