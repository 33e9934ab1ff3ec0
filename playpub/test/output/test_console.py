"""Tests for playpub.output.console."""

from __future__ import annotations

import pytest

from playpub.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_prefixes_and_styles(self) -> None:
        c = MockConsole()
        c.success("done")
        c.error("broken")
        c.warning("careful")
        c.info("fyi")
        c.header("com.x")
        c.newline()

        assert c.messages == ["OK done", "error: broken", "warning: careful", "info: fyi", "com.x", ""]
        assert c.has_error()
        assert c.count(Style.SUCCESS) == 1

    def test_find(self) -> None:
        c = MockConsole()
        c.print("- apk: a.apk")
        c.print("- obb 1: main=main.1.com.x.obb patch=-", Style.DIM)

        assert [o.style for o in c.find("obb")] == [Style.DIM]
        assert c.text.count("\n") == 1


class TestRichConsole:
    def test_markup_in_messages_is_printed_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        c = RichConsole()
        c.error("file [release]/app.apk")

        out = capsys.readouterr().out
        assert "error:" in out
        assert "[release]/app.apk" in out
