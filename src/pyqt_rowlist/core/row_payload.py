"""
Drag payload codec.

A row drag carries a token for the source container and the dragged index,
encoded as ASCII ``b"<token>:<index>"`` under ROW_MIME_TYPE. The token lets
a container refuse rows dragged out of a different container.
"""

from typing import Tuple

from .exceptions import RowPayloadError

ROW_MIME_TYPE = "application/x-pyqt-rowlist-row"


def encode_row_payload(container_token: str, index: int) -> bytes:
    """Encode a (container token, row index) pair."""
    if ":" in container_token:
        raise ValueError(f"Container token may not contain ':': {container_token!r}")
    return f"{container_token}:{index}".encode("ascii")


def decode_row_payload(payload: bytes) -> Tuple[str, int]:
    """
    Decode a payload produced by encode_row_payload.

    Raises:
        RowPayloadError: If the bytes are not a valid row payload
    """
    try:
        text = bytes(payload).decode("ascii")
        token, _, raw_index = text.rpartition(":")
        index = int(raw_index)
    except (UnicodeDecodeError, ValueError, TypeError) as e:
        raise RowPayloadError(f"Malformed row payload {payload!r}: {e}") from e

    if not token or index < 0:
        raise RowPayloadError(f"Malformed row payload {payload!r}")
    return token, index
