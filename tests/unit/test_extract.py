"""Tests for gldetect.extract."""

from __future__ import annotations

from gldetect.extract import (
    FOUR_DIGITS_RE,
    GEFORCE_3DIGIT_RE,
    GEFORCE_4DIGIT_RE,
    NV_CODE_RE,
    RADEON_HD_RE,
    RADEON_X_RE,
    extract,
    trailing_number,
)


class TestExtract:
    def test_hd_model(self) -> None:
        assert extract("ATI Radeon HD 4850", RADEON_HD_RE) == "HD 4850"

    def test_no_match_is_empty(self) -> None:
        assert extract("Software Rasterizer", RADEON_HD_RE) == ""

    def test_first_occurrence_wins(self) -> None:
        assert extract("X300 and X1300", RADEON_X_RE) == "X300"

    def test_x_takes_four_digits(self) -> None:
        assert extract("Radeon X1950 Pro", RADEON_X_RE) == "X1950"

    def test_bare_four_digits_word_bounded(self) -> None:
        assert extract("RADEON 9600 XT", FOUR_DIGITS_RE) == "9600"
        assert extract("12345", FOUR_DIGITS_RE) == ""

    def test_nv_code_is_uppercase_hex(self) -> None:
        assert extract("Gallium 0.4 on NVA8", NV_CODE_RE) == "NVA8"
        assert extract("Gallium 0.4 on nv50", NV_CODE_RE) == ""

    def test_geforce_four_digit_with_mobile_suffix(self) -> None:
        assert extract("GeForce 9400M/PCIe/SSE2", GEFORCE_4DIGIT_RE) == "GeForce 9400M"

    def test_geforce_three_digit_with_tier(self) -> None:
        assert extract("GeForce GTX 480/PCIe/SSE2", GEFORCE_3DIGIT_RE) == "GeForce GTX 480"

    def test_plain_string_pattern(self) -> None:
        assert extract("Mesa DRI R600", "R[0-9]00") == "R600"


class TestTrailingNumber:
    def test_strips_mobile_suffix(self) -> None:
        assert trailing_number("GeForce 9400M", 4) == 9400

    def test_reads_last_digits(self) -> None:
        assert trailing_number("GeForce GTX 480", 3) == 480

    def test_non_numeric_is_zero(self) -> None:
        assert trailing_number("GeForce", 3) == 0
