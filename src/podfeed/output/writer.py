"""Feed file writer."""

import logging
import os
import tempfile
from pathlib import Path

from podfeed.utils.errors import OutputError

logger = logging.getLogger(__name__)


class FeedWriter:
    """Writes rendered feed documents to disk."""

    def write(self, path: Path | str, contents: str) -> Path:
        """Write the feed atomically as UTF-8.

        Args:
            path: Destination file (parent directories are created)
            contents: Rendered XML document

        Returns:
            Resolved path of the written file

        Raises:
            OutputError: If the file cannot be written
        """
        file_path = Path(path).expanduser().resolve()
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write_file_atomic(file_path, contents)
        except OSError as e:
            raise OutputError(f"Could not write feed to {file_path}: {e}") from e
        return file_path

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write file atomically with guaranteed durability.

        Content goes to a temp file in the same directory, is fsynced, then
        renamed over the target so readers never see a partial feed.

        Args:
            file_path: Target file path
            content: File content

        Raises:
            OSError: If write or sync fails
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=".xml"
        )

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            # mkstemp creates 0600; feeds are meant to be served
            os.chmod(temp_path, 0o644)
            Path(temp_path).replace(file_path)

            # Persist the rename (best effort)
            try:
                dir_fd = os.open(file_path.parent, os.O_RDONLY)
                try:
                    os.fsync(dir_fd)
                finally:
                    os.close(dir_fd)
            except (OSError, AttributeError) as e:
                logger.debug(f"Directory fsync not supported: {e}")

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise
