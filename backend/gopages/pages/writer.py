"""GoPages — Filesystem writer for generated pages."""

import asyncio
import os
from pathlib import Path

from gopages.errors import PageWriteError


class FileWriter:
    """Writes UTF-8 text files, creating parent directories as needed."""

    def __init__(self, root: str | Path | None = None):
        self.root = Path(root) if root is not None else None

    def _resolve(self, file_path: str) -> Path:
        path = Path(file_path)
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        return path

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        os.chmod(path, 0o644)

    async def save_file(self, file_path: str, content: str) -> None:
        # filesystem calls run in a worker thread, off the event loop
        path = self._resolve(file_path)
        try:
            await asyncio.to_thread(self._write, path, content)
        except OSError as exc:
            raise PageWriteError(file_path, exc.strerror or str(exc)) from exc
