from .code_writer import (
    COMMENT_MARKER,
    INDENT_UNIT,
    SUPPRESSED_LINTS,
    CodeWriter,
)
from .errors import CodegenError, SinkWriteError
from .version import __version__
from .wire_format import WireType

__all__ = [
    "CodeWriter",
    "COMMENT_MARKER",
    "INDENT_UNIT",
    "SUPPRESSED_LINTS",
    "CodegenError",
    "SinkWriteError",
    "WireType",
    "__version__",
]
