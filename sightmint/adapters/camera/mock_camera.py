"""Mock camera: serves scripted frames, or a random sample image from a directory."""
import random
from pathlib import Path

from sightmint.adapters.camera.base import CameraAdapter

SAMPLE_SUFFIXES = (".jpg", ".jpeg", ".png")


class MockCamera(CameraAdapter):
    def __init__(self, status_store, frames: list[bytes] | None = None, samples_dir: str | Path | None = None):
        self.status = status_store
        self.frames = list(frames or [])
        self.samples_dir = Path(samples_dir) if samples_dir else None
        self.acquired = False

    def acquire(self):
        self.acquired = True

    def release(self):
        if self.acquired:
            self.status.log("mock_camera: released")
        self.acquired = False

    def capture_bytes(self) -> bytes | None:
        self.acquire()
        if self.frames:
            self.status.log("mock_camera: serving scripted frame")
            return self.frames.pop(0)
        if self.samples_dir is None or not self.samples_dir.is_dir():
            self.status.log("mock_camera: no frames available")
            return None
        samples = [p for p in self.samples_dir.iterdir() if p.suffix.lower() in SAMPLE_SUFFIXES]
        if not samples:
            self.status.log(f"mock_camera: no sample images in {self.samples_dir}")
            return None
        chosen = random.choice(samples)
        self.status.log(f"mock_camera: serving {chosen.name}")
        return chosen.read_bytes()
