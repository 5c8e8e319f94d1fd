import cv2
import numpy as np
import pytest

from sightmint.orchestrator.contracts import CapturedImage
from sightmint.services.status_store import StatusStore

OWNER = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


def _encode(ext: str) -> bytes:
    img = np.zeros((32, 32, 3), dtype=np.uint8)
    img[8:24, 8:24] = (40, 120, 220)
    ok, buf = cv2.imencode(ext, img)
    assert ok
    return buf.tobytes()


@pytest.fixture
def status():
    return StatusStore()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _encode(".jpg")


@pytest.fixture
def png_bytes() -> bytes:
    return _encode(".png")


@pytest.fixture
def captured_image(jpeg_bytes) -> CapturedImage:
    return CapturedImage(data=jpeg_bytes, mime_type="image/jpeg")


@pytest.fixture
def owner() -> str:
    return OWNER
