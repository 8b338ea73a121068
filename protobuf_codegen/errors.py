"""Errors raised while emitting generated source code"""


class CodegenError(Exception):
    """Base class for every error raised by this package."""


class SinkWriteError(CodegenError):
    """
    Occurs when the output sink refuses a write, for example because the
    underlying file was closed or the disk is full. The generated unit is
    incomplete at this point and should be discarded.
    """

    def __init__(self, line: str, cause: Exception) -> None:
        super().__init__(
            f"Could not write generated line {line!r} to the output sink: {cause}"
        )

        self.line = line
