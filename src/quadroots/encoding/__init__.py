from quadroots.encoding._base64 import decode, encode

__all__ = ["encode", "decode"]
