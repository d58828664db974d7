"""
Модульные тесты для barcodekit/scanning.py
Тестирует обработку результатов декодера при непрерывном сканировании.
"""

from __future__ import annotations

import threading
from typing import List

import pytest

from barcodekit.scanning import (
    ContinuousScanSession,
    DecodeChecksumError,
    DecodeError,
    DecodeFormatError,
    DecodeNotFound,
    ScanResult,
)


@pytest.fixture
def delivered() -> List[ScanResult]:
    return []


@pytest.fixture
def session(delivered: List[ScanResult]) -> ContinuousScanSession:
    return ContinuousScanSession(delivered.append)


class TestContinuousScanSession:
    def test_initially_active(self, session: ContinuousScanSession) -> None:
        assert session.active is True

    def test_not_found_is_ignored(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        for _ in range(5):
            assert session.feed(error=DecodeNotFound()) is False
        assert session.active is True
        assert delivered == []
        assert session.abandon() is None

    def test_first_result_delivered_once(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        first = ScanResult("036000291452", "upca")
        assert session.feed(first) is True
        assert session.feed(ScanResult("123456789012", "upca")) is False
        assert delivered == [first]
        assert session.active is False

    def test_non_upca_text_passed_through(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        result = ScanResult("HELLO-128", "code128")
        assert session.feed(result) is True
        assert delivered == [result]

    def test_unknown_symbology_passed_through(self, session: ContinuousScanSession) -> None:
        assert session.feed(ScanResult("payload", "qr_code")) is True

    def test_empty_frame(self, session: ContinuousScanSession) -> None:
        assert session.feed() is False
        assert session.active is True

    def test_decode_errors_suppressed_until_abandon(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        checksum = DecodeChecksumError("bad checksum")
        assert session.feed(error=DecodeFormatError("corrupt")) is False
        assert session.feed(error=checksum) is False
        assert session.feed(error=DecodeNotFound()) is False
        assert session.active is True
        assert delivered == []

        assert session.abandon() is checksum
        assert session.abandon() is None
        assert session.active is False

    def test_upca_checksum_mismatch_suppressed(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        assert session.feed(ScanResult("036000291459", "UPC-A")) is False
        assert delivered == []
        error = session.abandon()
        assert isinstance(error, DecodeChecksumError)

    def test_upca_bad_format_suppressed(self, session: ContinuousScanSession) -> None:
        assert session.feed(ScanResult("03600029145", "upca")) is False
        assert isinstance(session.abandon(), DecodeFormatError)

    def test_result_after_decode_error_is_delivered(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        session.feed(error=DecodeFormatError("corrupt"))
        assert session.feed(ScanResult("036000291452", "upca")) is True
        assert len(delivered) == 1

    def test_other_errors_propagate(self, session: ContinuousScanSession) -> None:
        with pytest.raises(OSError, match="camera"):
            session.feed(error=OSError("camera busy"))

    def test_feed_after_abandon_ignored(
        self, session: ContinuousScanSession, delivered: List[ScanResult]
    ) -> None:
        session.abandon()
        assert session.feed(ScanResult("036000291452", "upca")) is False
        assert session.feed(error=OSError("ignored once stopped")) is False
        assert delivered == []

    def test_concurrent_feeds_deliver_once(self, delivered: List[ScanResult]) -> None:
        session = ContinuousScanSession(delivered.append)
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            session.feed(ScanResult("036000291452", "upca"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(delivered) == 1


def test_decode_outcomes_share_base() -> None:
    for cls in (DecodeNotFound, DecodeChecksumError, DecodeFormatError):
        assert issubclass(cls, DecodeError)
