import pytest

from barcodekit.model.enums import Symbology


class TestSymbology:
    def test_values(self) -> None:
        assert Symbology.UPCA.value == "upca"
        assert Symbology("code128") is Symbology.CODE128

    def test_is_str(self) -> None:
        assert Symbology.UPCA == "upca"

    @pytest.mark.parametrize("lang", ["ru", "en"])
    def test_localized_name_covers_all(self, lang: str) -> None:
        for member in Symbology:
            assert member.localized_name(lang)  # type: ignore[arg-type]

    def test_localized_name_upca(self) -> None:
        assert Symbology.UPCA.localized_name("en") == "UPC-A"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("upca", Symbology.UPCA),
            ("UPC-A", Symbology.UPCA),
            (" upc ", Symbology.UPCA),
            ("EAN-13", Symbology.EAN13),
            ("gtin-13", Symbology.EAN13),
            ("Code 128", Symbology.CODE128),
            ("code_39", Symbology.CODE39),
        ],
    )
    def test_parse(self, text: str, expected: Symbology) -> None:
        assert Symbology.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "qr", "upc-z"])
    def test_parse_unknown(self, text: str) -> None:
        with pytest.raises(ValueError, match="Unknown symbology"):
            Symbology.parse(text)
