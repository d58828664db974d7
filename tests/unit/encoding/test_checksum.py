from __future__ import annotations

import pytest

from barcodekit.encoding.checksum import (
    compute_check_digit,
    ensure_digit_string,
    is_digit_string,
)
from barcodekit.exceptions import EncodingError, FormatError
from barcodekit.model.enums import Symbology


class TestComputeCheckDigit:
    def test_known_vector(self) -> None:
        assert compute_check_digit("03600029145") == 2

    @pytest.mark.parametrize(
        "data,expected",
        [
            ("12345678901", 2),
            ("04210000526", 4),
            ("00000000000", 0),
            ("99999999999", 3),
            ("01234567890", 5),
        ],
    )
    def test_vectors(self, data: str, expected: int) -> None:
        assert compute_check_digit(data) == expected

    def test_deterministic(self) -> None:
        results = {compute_check_digit("72527273070") for _ in range(50)}
        assert len(results) == 1

    @pytest.mark.parametrize(
        "data", ["", "1234567890", "123456789012", "0360002914a", "036 0002914", "٠٣٦٠٠٠٢٩١٤٥"]
    )
    def test_rejects_bad_input(self, data: str) -> None:
        with pytest.raises(FormatError):
            compute_check_digit(data)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(FormatError, match="string"):
            compute_check_digit(3600029145)  # type: ignore[arg-type]


class TestEnsureDigitString:
    def test_returns_value(self) -> None:
        assert ensure_digit_string("123", {3}) == "123"

    def test_length_error_context(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            ensure_digit_string("12345", {11, 12})
        err = exc_info.value
        assert err.context["length"] == 5
        assert err.symbology == "upca"
        assert "11 or 12 digits" in err.message

    def test_position_reported(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            ensure_digit_string("12345678901a", {11, 12})
        assert exc_info.value.context["position"] == 11

    def test_symbology_passed_through(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            ensure_digit_string("1", {8}, Symbology.EAN8)
        assert exc_info.value.symbology == "ean8"

    def test_format_error_is_encoding_error(self) -> None:
        with pytest.raises(EncodingError):
            ensure_digit_string("x", {1})


@pytest.mark.parametrize(
    "value,expected",
    [("0123", True), ("", False), ("12a", False), ("²", False), (123, False), (None, False)],
)
def test_is_digit_string(value: object, expected: bool) -> None:
    assert is_digit_string(value) is expected
