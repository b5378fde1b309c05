"""Tests for gldetect.formatters.kv module."""

from __future__ import annotations

import io

from gldetect.formatters.kv import format_kv, write_kv


class TestFormatKv:
    def test_aligned_columns(self) -> None:
        result = format_kv({"Driver": "R600G", "GPU class": "R700"})
        lines = result.split("\n")
        # max_key=9, label width=9+2=11; "Driver:" (7) padded to 11
        assert lines[0] == "Driver:    R600G"
        assert lines[1] == "GPU class: R700"

    def test_fixed_width(self) -> None:
        result = format_kv({"Driver": "NVIDIA"}, width=12)
        assert result == "Driver:     NVIDIA"

    def test_label_longer_than_width_keeps_value(self) -> None:
        assert format_kv({"Virtual Machine": "no"}, width=4) == "Virtual Machine:no"

    def test_none_value_shows_dash(self) -> None:
        assert format_kv({"nullable": None}) == "nullable: -"

    def test_empty_string_shows_dash(self) -> None:
        assert format_kv({"empty": ""}) == "empty: -"

    def test_empty_dict_fallback(self) -> None:
        assert format_kv({}) == str({})

    def test_non_dict_fallback(self) -> None:
        assert format_kv("not a dict") == "not a dict"  # type: ignore[arg-type]

    def test_custom_empty_marker(self) -> None:
        assert format_kv({"a": "", "b": None}, empty="") == "a: \nb: "


class TestWriteKv:
    def test_writes_to_stream(self) -> None:
        buf = io.StringIO()
        write_kv({"release": "5.15.0-91-generic", "version": "5.15"}, out=buf)
        text = buf.getvalue()
        assert text.endswith("\n")
        lines = text.strip().split("\n")
        # max_key=7, label width=7+2=9; "release:" (8) padded to 9
        assert lines[0] == "release: 5.15.0-91-generic"
        assert lines[1] == "version: 5.15"

    def test_width_forwarded(self) -> None:
        buf = io.StringIO()
        write_kv({"a": 1}, out=buf, width=5)
        assert buf.getvalue() == "a:   1\n"
