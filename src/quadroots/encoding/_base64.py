import base64
import binascii

from quadroots.exceptions import RootDecodingError

_TEXT_ENCODING = "utf-8"


def encode(text: str) -> str:
    """Encode text as padded base64 over the RFC 4648 alphabet.

    The text is first turned into its UTF-8 bytes, so any valid Unicode
    string survives :func:`decode` unchanged.

    Raises:
        UnicodeEncodeError: If ``text`` holds lone surrogates, which have no
            UTF-8 form.
    """
    return base64.b64encode(text.encode(_TEXT_ENCODING)).decode("ascii")


def decode(encoded: str) -> str:
    """Decode text produced by :func:`encode`.

    Raises:
        quadroots.exceptions.RootDecodingError: If ``encoded`` is not valid
            padded base64 or does not decode to UTF-8 text.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as err:
        raise RootDecodingError(f"{encoded!r} is not valid base64: {err}") from err
    try:
        return raw.decode(_TEXT_ENCODING)
    except UnicodeDecodeError as err:
        raise RootDecodingError(
            f"{encoded!r} does not decode to {_TEXT_ENCODING} text"
        ) from err
