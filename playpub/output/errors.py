"""Rendering and exit codes for run-aborting publish errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playpub.core.errors import ErrorCode
from playpub.output.console import Style
from playpub.publish.errors import (
    ConfigError,
    DiscoveryError,
    NamingConventionError,
    ParseError,
    PublishError,
)

if TYPE_CHECKING:
    from playpub.output.console import ConsoleProtocol

__all__ = ["print_publish_error", "publish_error_exit_code"]


def print_publish_error(error: PublishError, console: ConsoleProtocol) -> None:
    match error:
        case ConfigError(messages=messages):
            console.error("Cannot upload to Google Play:")
            for m in messages:
                console.print(f"- {m}")
        case DiscoveryError():
            console.error(error.message)
        case ParseError():
            console.error(error.message)
        case NamingConventionError():
            console.error(error.message)
            console.print(f"hint: {error.hint}", Style.DIM)


def publish_error_exit_code(error: PublishError) -> int:
    match error:
        case ConfigError():
            return int(ErrorCode.CONFIG_ERROR)
        case DiscoveryError():
            return int(ErrorCode.DISCOVERY_ERROR)
        case ParseError() | NamingConventionError():
            return int(ErrorCode.ARTIFACT_ERROR)
