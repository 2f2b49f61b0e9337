"""Base64 helpers for the string encode/decode commands."""
import base64
import binascii

_ENCODING_ALIASES = {
    "unicode": "utf-16-le",
    "utf16": "utf-16-le",
    "utf-16": "utf-16-le",
    "utf8": "utf-8",
    "ascii": "ascii",
}


def _normalize_encoding(encoding: str) -> str:
    candidate = (encoding or "utf-8").strip().lower()
    return _ENCODING_ALIASES.get(candidate, candidate)


def encode_base64(text: str, encoding: str = "utf-8") -> str:
    """Encode ``text`` with the given character encoding and return Base64."""
    raw = text.encode(_normalize_encoding(encoding))
    return base64.b64encode(raw).decode("ascii")


def decode_base64(value: str, encoding: str = "utf-8") -> str:
    """Decode a Base64 string back to text.

    Raises ``ValueError`` when the input is not valid Base64 or the decoded
    bytes are not valid in ``encoding``.
    """
    try:
        raw = base64.b64decode(value.strip(), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid Base64 input: {exc}") from exc
    return raw.decode(_normalize_encoding(encoding))
