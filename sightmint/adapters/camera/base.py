from abc import ABC, abstractmethod


class CameraAdapter(ABC):
    """A scoped camera handle: acquire once, hold for the session, release on teardown."""

    def acquire(self):
        pass

    def release(self):
        pass

    @abstractmethod
    def capture_bytes(self) -> bytes | None:
        """Capture one frame. Returns JPEG bytes or None on failure."""
        ...

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
