"""Repository layer - persistence codec and file storage."""

from folio.repositories.codec import serialize, parse
from folio.repositories.file_repo import StateRepository, FileStateRepository

__all__ = [
    "serialize",
    "parse",
    "StateRepository",
    "FileStateRepository",
]
