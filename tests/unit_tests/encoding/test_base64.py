import hypothesis.strategies as st
import pytest
from hypothesis import given

from quadroots import encoding
from quadroots.exceptions import RootDecodingError


@given(st.text())
def test_decode_inverts_encode(text):
    assert encoding.decode(encoding.encode(text)) == text


@pytest.mark.parametrize(
    "text, encoded",
    [
        ("", ""),
        ("2", "Mg=="),
        ("5", "NQ=="),
        ("2.5", "Mi41"),
        ("-12.75", "LTEyLjc1"),
    ],
)
def test_encode_uses_padded_standard_alphabet(text, encoded):
    assert encoding.encode(text) == encoded
    assert encoding.decode(encoded) == text


@pytest.mark.parametrize("text", ["", "æøå", "√2", "\x00\xff", "🙂 root"])
def test_roundtrip_non_ascii(text):
    encoded = encoding.encode(text)
    assert encoded.isascii()
    assert encoding.decode(encoded) == text


@pytest.mark.parametrize("malformed", ["Mg", "M===", "Mg*=", "not base64!", "æ"])
def test_decode_malformed_raises(malformed):
    with pytest.raises(RootDecodingError, match="is not valid base64"):
        encoding.decode(malformed)


def test_decode_non_utf8_raises():
    # "/w==" is the single byte 0xff
    with pytest.raises(RootDecodingError, match="does not decode to utf-8 text"):
        encoding.decode("/w==")


@pytest.mark.parametrize("text", ["\ud800", "root \udfff"])
def test_encode_lone_surrogate_raises(text):
    with pytest.raises(UnicodeEncodeError, match="surrogates not allowed"):
        encoding.encode(text)
