"""
User-supplied image files (upload / data URL).

Bytes are accepted only if OpenCV can decode them as an image.
"""
import base64
import binascii
from datetime import datetime, timezone

import cv2
import numpy as np

from sightmint.orchestrator.contracts import CapturedImage
from sightmint.orchestrator.errors import CaptureError


def parse_data_url(value: str, mime_type: str | None = None) -> tuple[bytes, str]:
    """Split `data:<mime>;base64,<payload>` into (bytes, mime).

    Plain base64 is accepted too; mime_type then defaults to image/jpeg.
    """
    value = (value or "").strip()
    if value.startswith("data:"):
        header, sep, b64 = value.partition(",")
        if not sep or ";base64" not in header:
            raise CaptureError("malformed data URL")
        mime_type = header[len("data:"):].split(";", 1)[0] or mime_type
    else:
        b64 = value
    try:
        data = base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CaptureError("base64 decode failed") from e
    return data, mime_type or "image/jpeg"


def decode_image(data: bytes, mime_type: str, captured_at: datetime | None = None) -> CapturedImage:
    if not data:
        raise CaptureError("no image data")
    if not mime_type or not mime_type.startswith("image/"):
        raise CaptureError(f"unsupported file type: {mime_type or 'unknown'}")
    arr = np.frombuffer(data, dtype=np.uint8)
    try:
        decoded = cv2.imdecode(arr, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise CaptureError("file could not be decoded as an image") from e
    if decoded is None:
        raise CaptureError("file could not be decoded as an image")
    return CapturedImage(
        data=bytes(data),
        mime_type=mime_type,
        captured_at=captured_at or datetime.now(timezone.utc),
    )
