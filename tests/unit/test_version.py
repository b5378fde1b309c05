"""Tests for gldetect.version."""

from __future__ import annotations

import pytest

from gldetect.version import VersionNumber


class TestParse:
    def test_first_digit_run_with_dots(self) -> None:
        assert VersionNumber.parse("4.5.0 NVIDIA 361.45") == VersionNumber(4, 5, 0)

    def test_no_digits(self) -> None:
        assert VersionNumber.parse("NoDigitsHere") == VersionNumber(0, 0, 0)

    def test_major_only(self) -> None:
        assert VersionNumber.parse("7") == VersionNumber(7, 0, 0)

    def test_leading_text_is_skipped(self) -> None:
        assert VersionNumber.parse("OpenGL ES 3.1 Mesa 20.1") == VersionNumber(3, 1, 0)

    def test_bytes_input(self) -> None:
        assert VersionNumber.parse(b"2.1 Mesa 7.9") == VersionNumber(2, 1, 0)

    def test_none_and_empty(self) -> None:
        assert VersionNumber.parse(None) == VersionNumber()
        assert VersionNumber.parse("") == VersionNumber()

    def test_kernel_release_suffix(self) -> None:
        assert VersionNumber.parse("5.4.0-42-generic") == VersionNumber(5, 4, 0)

    def test_extra_components_ignored(self) -> None:
        assert VersionNumber.parse("15.200.1062.1004") == VersionNumber(15, 200, 1062)

    def test_empty_component_is_zero(self) -> None:
        assert VersionNumber.parse("1..2") == VersionNumber(1, 0, 2)

    def test_oversized_component_is_zero(self) -> None:
        assert VersionNumber.parse("1.70000.3") == VersionNumber(1, 0, 3)


class TestCanonicalString:
    def test_patch_omitted_when_zero(self) -> None:
        assert str(VersionNumber(4, 5, 0)) == "4.5"

    def test_patch_kept_when_nonzero(self) -> None:
        assert str(VersionNumber(4, 5, 1)) == "4.5.1"

    def test_zero_version(self) -> None:
        assert str(VersionNumber()) == "0.0"

    @pytest.mark.parametrize(
        "version",
        [VersionNumber(0, 4, 0), VersionNumber(361, 45, 0), VersionNumber(2**32 - 1, 65535, 65535)],
    )
    def test_round_trip(self, version: VersionNumber) -> None:
        assert VersionNumber.from_string(str(version)).pack() == version.pack()


class TestPacking:
    def test_pack_layout(self) -> None:
        assert VersionNumber(4, 5, 1).pack() == (4 << 32) | (5 << 16) | 1

    def test_unpack_inverts_pack(self) -> None:
        assert VersionNumber.unpack(VersionNumber(10, 1, 3).pack()) == VersionNumber(10, 1, 3)

    def test_packed_order_matches_triple_order(self) -> None:
        a = VersionNumber(1, 10, 0)
        b = VersionNumber(1, 9, 65535)
        assert a > b
        assert a.pack() > b.pack()


class TestTruthiness:
    def test_zero_is_falsy(self) -> None:
        assert not VersionNumber()

    def test_nonzero_is_truthy(self) -> None:
        assert VersionNumber(0, 0, 1)


class TestFieldRanges:
    @pytest.mark.parametrize(
        ("fields", "name"),
        [
            ((0, 70000, 0), "minor"),
            ((0, 0, 65536), "patch"),
            ((2**32, 0, 0), "major"),
            ((-1, 0, 0), "major"),
            ((1, -2, 0), "minor"),
        ],
    )
    def test_out_of_range_rejected(self, fields: tuple[int, int, int], name: str) -> None:
        with pytest.raises(ValueError, match=name):
            VersionNumber(*fields)

    def test_limits_accepted(self) -> None:
        top = VersionNumber(2**32 - 1, 65535, 65535)
        assert top > VersionNumber(2**32 - 2, 65535, 65535)
        assert top.pack() > VersionNumber(2**32 - 2, 65535, 65535).pack()
