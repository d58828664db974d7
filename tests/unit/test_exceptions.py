from __future__ import annotations

import pytest

from barcodekit.exceptions import (
    BarcodeError,
    ChecksumError,
    EmptySequenceError,
    EncodingError,
    FormatError,
    RenderError,
    UnsupportedSymbologyError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [FormatError, ChecksumError, UnsupportedSymbologyError]
    )
    def test_encoding_errors(self, cls: type) -> None:
        assert issubclass(cls, EncodingError)
        assert issubclass(cls, BarcodeError)
        assert not issubclass(cls, RenderError)

    def test_render_errors(self) -> None:
        assert issubclass(EmptySequenceError, RenderError)
        assert issubclass(RenderError, BarcodeError)
        assert not issubclass(EmptySequenceError, EncodingError)


class TestBarcodeError:
    def test_attributes(self) -> None:
        err = BarcodeError("boom", symbology="upca", context={"length": 5})
        assert err.message == "boom"
        assert err.symbology == "upca"
        assert err.context == {"length": 5}

    def test_defaults(self) -> None:
        err = BarcodeError("boom")
        assert err.symbology is None
        assert err.context == {}
        assert str(err) == "boom"

    def test_str_with_symbology(self) -> None:
        assert str(FormatError("bad", symbology="upca")) == "[upca] bad"

    def test_repr(self) -> None:
        assert repr(FormatError("bad")) == (
            "FormatError(message='bad', symbology=None, context={})"
        )


def test_checksum_error_digits() -> None:
    err = ChecksumError("mismatch", expected=2, actual=9, context={"value": "x"})
    assert err.expected == 2
    assert err.actual == 9
    assert err.context == {"value": "x", "expected": 2, "actual": 9}
