"""Core primitives shared by the publish engine and the CLI."""

from playpub.core.errors import ErrorCode
from playpub.core.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "ErrorCode",
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
