import os
from datetime import datetime

from src.logger_utc.formatter import format_date

_SEPARATORS = tuple(sep for sep in ("/", os.sep, os.altsep) if sep)

def _normalize_dir(directory) -> str:
    if directory is None:
        return ""
    directory = os.fspath(directory)
    # "" would otherwise become "/" and point at the filesystem root
    if not directory:
        return ""
    if directory.endswith(_SEPARATORS):
        return directory
    return f"{directory}/"

def resolve_dynamic_path(file_name: str, directory=None, now: datetime | None = None) -> str:
    """
    Build `<directory><YYYY-MM-DD>-<file_name>` for the current UTC date.

    `directory` may be None (current working directory), a string or a
    path-like object; a trailing separator is added only when missing.
    An empty directory string is treated like None rather than "/".
    The filesystem is not touched.
    """
    return f"{_normalize_dir(directory)}{format_date(now)}-{file_name}"
