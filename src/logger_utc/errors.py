class LogFileError(OSError):
    """Raised when a log line cannot be appended to its file."""

    @classmethod
    def from_os_error(cls, error: OSError, path: str, action: str) -> "LogFileError":
        strerror = error.strerror or str(error)
        return cls(error.errno, f"Unable to {action} logfile: {strerror}", path)
