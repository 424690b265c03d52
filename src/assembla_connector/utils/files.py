"""File utility functions."""

from pathlib import Path


def sanitize_filename(filename: str) -> str:
    """Sanitize filename to prevent path traversal attacks.

    Removes directory separators, parent directory references, and
    non-printable characters to ensure the filename is safe to use.

    Args:
        filename: The filename to sanitize

    Returns:
        Safe filename with dangerous characters removed
    """
    safe_name = filename.replace("/", "_").replace("\\", "_").replace("..", "_")
    safe_name = "".join(c for c in safe_name if c.isprintable())

    # Limit length to filesystem maximum
    if len(safe_name) > 255:
        safe_name = safe_name[:255]

    return safe_name or "unnamed_file"


def unique_path(path: Path) -> Path:
    """Return ``path``, or ``stem_N.suffix`` for the first N that does not exist yet."""
    if not path.exists():
        return path

    counter = 1
    candidate = path
    while candidate.exists():
        candidate = path.with_name(f"{path.stem}_{counter}{path.suffix}")
        counter += 1
    return candidate
