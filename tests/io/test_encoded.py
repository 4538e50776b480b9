"""Tests for :mod:`resreader.io.encoded`."""

from __future__ import annotations

import codecs

import pytest

from resreader.io.encoded import EncodedResource, detect_bom
from resreader.io.resource import BytesResource


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (codecs.BOM_UTF8 + b"x", "utf-8-sig"),
        (codecs.BOM_UTF16_LE + b"x\x00", "utf-16"),
        (codecs.BOM_UTF16_BE + b"\x00x", "utf-16"),
        (codecs.BOM_UTF32_LE + b"x\x00\x00\x00", "utf-32"),
        (b"plain", None),
        (b"", None),
    ],
)
def test_detect_bom(payload: bytes, expected: str | None) -> None:
    assert detect_bom(payload) == expected


def test_utf8_bom_is_consumed() -> None:
    encoded = EncodedResource(BytesResource(codecs.BOM_UTF8 + b"key=value"))

    assert encoded.read_text() == "key=value"


def test_declared_encoding_wins_over_bom() -> None:
    payload = codecs.BOM_UTF8 + "é".encode("utf-8")
    encoded = EncodedResource(BytesResource(payload), "latin-1")

    assert encoded.read_text() == "ï»¿Ã©"


def test_bom_detection_can_be_disabled() -> None:
    encoded = EncodedResource(
        BytesResource(codecs.BOM_UTF8 + b"x"),
        detect_bom=False,
    )

    assert encoded.read_text() == "\ufeffx"


def test_default_encoding_used_without_bom() -> None:
    encoded = EncodedResource(
        BytesResource("ñ".encode("latin-1")),
        default_encoding="latin-1",
    )

    with encoded.get_reader() as reader:
        assert reader.encoding == "latin-1"
        assert reader.read() == "ñ"


def test_unknown_encoding_fails_before_opening() -> None:
    class _Unopenable(BytesResource):
        def open(self):  # type: ignore[override]
            raise AssertionError("must not open")

    with pytest.raises(LookupError):
        EncodedResource(_Unopenable(b""), "no-such-codec").get_reader()


def test_reader_close_closes_byte_stream() -> None:
    encoded = EncodedResource(BytesResource(b"abc"))

    reader = encoded.get_reader()
    raw = reader.buffer
    reader.close()

    assert raw.closed


def test_invalid_bytes_fail_when_read() -> None:
    encoded = EncodedResource(BytesResource(b"\xff\xfe\xfd"), "utf-8", detect_bom=False)

    with encoded.get_reader() as reader:
        with pytest.raises(UnicodeDecodeError):
            reader.read()


def test_requires_reader_and_identity() -> None:
    resource = BytesResource(b"abc")

    assert not EncodedResource(resource).requires_reader()
    assert EncodedResource(resource, "utf-8").requires_reader()
    assert EncodedResource(resource, "utf-8") == EncodedResource(resource, "utf-8")
    assert hash(EncodedResource(resource)) == hash(EncodedResource(resource))
    assert EncodedResource(resource) != EncodedResource(resource, "utf-8")
    assert str(EncodedResource(resource)) == str(resource)
    assert EncodedResource(resource).get_input_stream().read() == b"abc"


def test_none_resource_is_rejected() -> None:
    with pytest.raises(ValueError):
        EncodedResource(None)  # type: ignore[arg-type]
