"""Unpadded base64 transcoding for PHC salt and hash segments.

Standard alphabet. Encoding strips every trailing '='; decoding pads the
input up to a multiple of 4 before handing it to the standard decoder.
"""

import base64
import binascii

from src.phc_common.errors import Base64DecodeError, ParseError


def b64encode(data: bytes) -> str:
    """Encode ``data`` as standard base64 with the padding removed."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(segment: str) -> bytes:
    """Decode an unpadded (or padded) standard base64 segment.

    Raises ParseError on an empty segment and Base64DecodeError on invalid
    characters or an impossible length.
    """
    if not segment:
        raise ParseError("empty base64 segment")
    remainder = len(segment) % 4
    if remainder:
        segment += "=" * (4 - remainder)
    try:
        return base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise Base64DecodeError(str(exc)) from exc
