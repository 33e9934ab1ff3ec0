from __future__ import annotations

from pathlib import Path

from playpub.core.errors import ErrorCode
from playpub.output.console import MockConsole
from playpub.output.errors import print_publish_error, publish_error_exit_code
from playpub.publish.errors import ConfigError, DiscoveryError, NamingConventionError, ParseError


def test_config_error_lists_every_message() -> None:
    console = MockConsole()
    error = ConfigError(messages=("Release track was not specified", "bad pattern"))

    print_publish_error(error, console)

    assert console.messages == [
        "error: Cannot upload to Google Play:",
        "- Release track was not specified",
        "- bad pattern",
    ]
    assert publish_error_exit_code(error) == ErrorCode.CONFIG_ERROR


def test_discovery_error_names_pattern() -> None:
    console = MockConsole()
    print_publish_error(DiscoveryError(pattern="out/*.apk"), console)

    assert console.find("'out/*.apk'")
    assert publish_error_exit_code(DiscoveryError(pattern="x")) == ErrorCode.DISCOVERY_ERROR


def test_naming_error_prints_hint() -> None:
    console = MockConsole()
    error = NamingConventionError(path="obb/data.bin")

    print_publish_error(error, console)

    assert console.find("obb/data.bin")
    assert console.find("hint:")
    assert publish_error_exit_code(error) == ErrorCode.ARTIFACT_ERROR


def test_parse_error_exit_code() -> None:
    error = ParseError(path=Path("a.apk"), reason="not a valid APK")
    assert publish_error_exit_code(error) == ErrorCode.ARTIFACT_ERROR
