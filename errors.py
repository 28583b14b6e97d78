# Error type shared by every stage of the abstracts pipeline
from enum import Enum


class ErrorKind(Enum):
    FETCH = "fetch"
    STATUS = "status"
    DECOMPRESS = "decompress"
    XML_TOKEN = "xml token"
    DECODE = "decode"
    WRITE = "write"
    CREATE = "create"


class PipelineError(Exception):
    """Fatal pipeline failure. Only main() catches it; everything else lets it propagate."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
