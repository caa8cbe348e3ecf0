"""
File backup and output utilities.

Provides timestamped backups for files that are about to be rewritten
and a helper that writes a chunk stream to a file while echoing it.
"""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path
from typing import IO, Iterable

from pls.utils.logging import get_logger

logger = get_logger(__name__)


def backup_path(path: str | Path, now: datetime | None = None) -> Path:
	"""
	Return the backup location for ``path``.

	The backup sits next to the original, suffixed with an RFC 3339
	timestamp in local time, e.g. ``notes.md.2024-01-02T03:04:05+01:00``.
	"""
	now = now or datetime.now().astimezone()
	if now.tzinfo is None:
		now = now.astimezone()
	stamp = now.isoformat(timespec="seconds")
	if stamp.endswith("+00:00"):
		stamp = stamp[:-len("+00:00")] + "Z"
	path = Path(path)
	return path.with_name(f"{path.name}.{stamp}")


def backup_file(path: str | Path, now: datetime | None = None) -> Path:
	"""
	Copy a file to a timestamped sibling.

	Parameters:
		path: File to back up.
		now: Timestamp to use; defaults to the current local time.

	Returns:
		Path of the backup copy.

	Raises:
		FileNotFoundError: If ``path`` does not exist.
	"""
	src = Path(path)
	dest = backup_path(src, now)
	shutil.copyfile(src, dest)
	logger.info("backed up %s to %s", src, dest)
	return dest


def tee_to_file(chunks: Iterable[str], fp: IO[str],
                echo: IO[str] | None = None) -> int:
	"""
	Write every chunk to ``fp`` and, when given, to ``echo``.

	Parameters:
		chunks: Text chunks to write.
		fp: Destination file object.
		echo: Optional second stream (usually stdout).

	Returns:
		Number of characters written.
	"""
	written = 0
	for chunk in chunks:
		fp.write(chunk)
		if echo is not None:
			echo.write(chunk)
			echo.flush()
		written += len(chunk)
	return written


__all__ = ["backup_path", "backup_file", "tee_to_file"]
