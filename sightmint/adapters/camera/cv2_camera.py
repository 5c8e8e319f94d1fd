"""
OpenCV webcam capture adapter.
CAMERA_INDEX env var (default 0) selects the webcam device.
"""
import cv2

from sightmint.adapters.camera.base import CameraAdapter


class CV2Camera(CameraAdapter):
    def __init__(self, status_store, index: int = 0, jpeg_quality: int = 85):
        self.status = status_store
        self._index = index
        self._quality = jpeg_quality
        self._cap = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def acquire(self):
        if self.is_open:
            return
        self._cap = cv2.VideoCapture(self._index)
        if self._cap.isOpened():
            self.status.log(f"cv2_camera: opened device {self._index}")
        else:
            self.status.log(f"cv2_camera: failed to open device {self._index}")

    def capture_bytes(self) -> bytes | None:
        self.acquire()
        if not self.is_open:
            return None
        ret, frame = self._cap.read()
        if not ret or frame is None:
            self.status.log("cv2_camera: frame capture failed")
            return None
        ok, buf = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, self._quality])
        if not ok:
            self.status.log("cv2_camera: jpeg encode failed")
            return None
        return buf.tobytes()

    def release(self):
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            self.status.log(f"cv2_camera: released device {self._index}")
