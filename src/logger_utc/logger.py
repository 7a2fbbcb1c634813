import os
from datetime import datetime

from src.logger_utc.formatter import make_line
from src.logger_utc.paths import resolve_dynamic_path
from src.logger_utc.writer import append_line, emit_console

def log(to_log: str) -> None:
    """Print `[%Y-%m-%d] - [%H:%M-%S] - <to_log>` to stdout."""
    emit_console(make_line(to_log))

def log_to_file(to_log: str, file_name) -> None:
    """
    Append `[%Y-%m-%d] - [%H:%M-%S] - <to_log>` to `file_name`.

    The file is created when missing and never truncated. No newline is
    written after the line. Raises LogFileError (an OSError) when the file
    cannot be opened or written.
    """
    append_line(file_name, make_line(to_log))

def log_to_dyn_file(to_log: str, file_path, file_name: str) -> None:
    """
    Append a timestamped line to `<file_path>/<%Y-%m-%d>-<file_name>`.

    `file_path` may end with '/' or not; when None the file goes to the
    current directory. The directory itself is not created.
    """
    log_to_file(to_log, resolve_dynamic_path(file_name, file_path))

class Logger:
    def __init__(self, file_name: str, directory=None, echo: bool = False):
        self._file_name = file_name
        self._directory = directory
        self._echo = echo

    def ensure_log_dir(self):
        if self._directory:
            os.makedirs(self._directory, exist_ok=True)

    def path_for_today(self, now: datetime | None = None) -> str:
        return resolve_dynamic_path(self._file_name, self._directory, now)

    def write(self, to_log: str):
        log_to_dyn_file(to_log, self._directory, self._file_name)
        if self._echo:
            log(to_log)
