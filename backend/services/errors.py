"""Fatal parse failures. Field-level misses are never errors."""


class ParseError(Exception):
    """Base class for failures that abort a whole parse."""


class UnsupportedFormat(ParseError):
    def __init__(self, extension: str, allowed: tuple[str, ...]) -> None:
        self.extension = extension
        self.allowed = allowed
        super().__init__(
            f"Unsupported file format: {extension or '<none>'} "
            f"(allowed: {', '.join(allowed)})"
        )


class ExtractionFailed(ParseError):
    def __init__(self, filename: str, reason: str = "could not extract text") -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not read document {filename!r}: {reason}")
