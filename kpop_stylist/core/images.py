"""Helpers for moving images between data URIs and raw bytes."""

import base64
import re

DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")


def strip_data_uri_prefix(reference: str) -> str:
    """Return the base64 payload of an image data URI.

    Strings without the ``data:image/<type>;base64,`` prefix are returned
    unchanged so a bare base64 payload is accepted as well.
    """
    return DATA_URI_PREFIX.sub("", reference, count=1)


def decode_data_uri(reference: str) -> bytes:
    """Decode an image data URI (or bare base64 string) into raw bytes.

    Raises:
        binascii.Error: If the payload contains non-base64 characters or
            bad padding
    """
    return base64.b64decode(strip_data_uri_prefix(reference), validate=True)


def to_png_data_uri(b64_payload: str) -> str:
    return f"data:image/png;base64,{b64_payload}"


__all__ = ["decode_data_uri", "strip_data_uri_prefix", "to_png_data_uri"]
