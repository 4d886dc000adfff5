"""Encodings for the hash portion of a digest. Only lowercase hex is supported."""

import re

from .core.exceptions import InvalidFormatError

# bytes.fromhex() skips ASCII whitespace; hex digits only
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class HexEncoding:
    """Lowercase hex on output; decoding accepts either case."""

    name = "hex"

    def encode(self, raw: bytes) -> str:
        return raw.hex()

    def decode(self, text: str) -> bytes:
        if not _HEX_DIGITS.fullmatch(text):
            raise InvalidFormatError(
                "invalid hex: non-hexadecimal character", context={"encoded": text}
            )
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise InvalidFormatError(f"invalid hex: {e}", context={"encoded": text}) from e

    def encoded_size(self, size: int) -> int:
        """Length of the encoded form of ``size`` raw bytes."""
        return 2 * size

    def __repr__(self) -> str:
        return "HexEncoding()"


HEX = HexEncoding()
