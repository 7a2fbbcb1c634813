import os

from src.logger_utc.errors import LogFileError

def append_line(path, line: str) -> None:
    """
    Append `line` to `path` as-is, creating the file if needed.

    The file is opened, written and closed within this call. No newline is
    added. Failures to open, write or close raise LogFileError; a partially
    written line is left in place.
    """
    path = os.fspath(path)
    try:
        handle = open(path, "a", encoding="utf-8", newline="")
    except OSError as error:
        raise LogFileError.from_os_error(error, path, "open") from error

    # close() flushes again, so it must stay inside the try
    try:
        with handle:
            handle.write(line)
            handle.flush()
    except OSError as error:
        raise LogFileError.from_os_error(error, path, "write to") from error

def emit_console(line: str) -> None:
    try:
        print(line, flush=True)
    except (OSError, ValueError):
        # closed or broken stdout
        pass
