"""Pre-upload file validation. Runs before any network call."""

from pathlib import Path
from typing import Iterable, Optional, Union

from contracts import FileValidation
from config import settings


def validate_file(
    file_path: Union[str, Path],
    allowed_extensions: Optional[Iterable[str]] = None,
    max_bytes: Optional[int] = None,
) -> FileValidation:
    """Check that the file exists, is non-empty, has an accepted type and size."""
    allowed = [e.lower() for e in (allowed_extensions or settings.allowed_upload_extensions)]
    max_bytes = max_bytes if max_bytes is not None else settings.max_upload_bytes
    path = Path(file_path)

    if path.suffix.lower() not in allowed:
        names = ", ".join(e.lstrip(".").upper() for e in allowed)
        return FileValidation(valid=False, error=f"Unsupported file type. Use {names}.")
    if not path.is_file():
        return FileValidation(valid=False, error=f"File not found: {path}")
    size = path.stat().st_size
    if size == 0:
        return FileValidation(valid=False, error="File is empty")
    if size > max_bytes:
        return FileValidation(valid=False, error=f"File exceeds {max_bytes // (1024 * 1024)} MB limit")
    return FileValidation(valid=True)
