"""Filesystem implementation for infrastructure.

Usage example:
    from pathlib import Path

    from officer_filing_validation.infrastructure.io.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    payload = fs.read_json(Path("submission.json"))
"""

from __future__ import annotations

from pathlib import Path
from typing import override

from ...protocols import FileSystem
from .validation import IncomingDataError, validate_json_as


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def read_json(self, path: Path) -> dict[str, object]:
        payload = path.read_text(encoding="utf-8")
        try:
            return validate_json_as(dict[str, object], payload)
        except IncomingDataError as exc:
            raise IncomingDataError(f"{path} must contain a JSON object.") from exc

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()
