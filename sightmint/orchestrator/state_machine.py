import threading
import time

from sightmint.adapters.camera.file_source import decode_image
from sightmint.adapters.classifier.parser import parse_response
from sightmint.orchestrator import errors, states
from sightmint.orchestrator.contracts import (
    CapturedImage, ClassificationResult, MintResult, PipelineRun,
)
from sightmint.orchestrator.errors import (
    CaptureError, InvalidTransition, NonAnimalDetected, PipelineError,
)


class Pipeline:
    """One user's capture -> classify -> mint session."""

    def __init__(self, camera, classifier, minter, status_store):
        self.camera = camera
        self.classifier = classifier
        self.minter = minter
        self.status = status_store
        self._lock = threading.Lock()
        self._clear()

    def _clear(self):
        self.state: states.PipelineState = states.AWAITING_CAPTURE
        self.image: CapturedImage | None = None
        self.result: ClassificationResult | None = None
        self.mint_result: MintResult | None = None
        self.error: str | None = None
        self.error_code: str | None = None
        self.history: list[str] = [states.AWAITING_CAPTURE]

    def _transition(self, target: str):
        if target not in states.TRANSITIONS[self.state]:
            raise InvalidTransition(self.state, target)
        self.status.log(f"pipeline: {self.state} -> {target}")
        self.state = target
        self.history.append(target)

    def _require_capturable(self):
        if self.state not in (states.AWAITING_CAPTURE, states.READY_TO_CLASSIFY):
            raise InvalidTransition(self.state, states.READY_TO_CLASSIFY)

    def _accept(self, image: CapturedImage) -> CapturedImage:
        self.image = image
        if self.state == states.AWAITING_CAPTURE:
            self._transition(states.READY_TO_CLASSIFY)
        else:
            self.status.log("pipeline: previous capture replaced")
        return image

    # ── image source ─────────────────────────────────────────────────────

    def capture(self) -> CapturedImage:
        """Grab one frame from the camera. Raises CaptureError, state unchanged."""
        self._require_capturable()
        if self.camera is None:
            self.status.log("pipeline: capture failed, no camera configured")
            raise CaptureError("no camera stream available")
        frame = self.camera.capture_bytes()
        if not frame:
            self.status.log("pipeline: capture failed, no frame")
            raise CaptureError("no frame available from camera")
        self.status.log(f"pipeline: captured frame ({len(frame)} bytes)")
        return self._accept(CapturedImage(data=frame, mime_type="image/jpeg"))

    def import_file(self, data: bytes, mime_type: str) -> CapturedImage:
        self._require_capturable()
        try:
            image = decode_image(data, mime_type)
        except CaptureError as e:
            self.status.log(f"pipeline: import rejected: {e}")
            raise
        self.status.log(f"pipeline: imported {mime_type} ({len(data)} bytes)")
        return self._accept(image)

    # ── classify + mint ──────────────────────────────────────────────────

    def confirm(self, owner_address: str) -> PipelineRun:
        """
        User confirmed the capture: classify, then mint if it is an animal.
        Runs both stages to completion; the outcome is also left on self.state.
        A second confirm while one is in flight raises InvalidTransition and
        leaves the running session alone.
        """
        if not owner_address:
            raise ValueError("owner address is required")
        with self._lock:
            if self.status.busy or self.state != states.READY_TO_CLASSIFY:
                raise InvalidTransition(self.state, states.CLASSIFYING)
            self.status.set_busy(True)
            self._transition(states.CLASSIFYING)

        t0 = time.time()
        try:
            raw = self.classifier.classify(self.image)
            self.result = parse_response(raw)
            self.status.log(
                f"pipeline: parsed species={self.result.species!r} animal={self.result.is_animal}"
            )
            if not self.result.is_animal:
                raise NonAnimalDetected(self.result.description)

            self._transition(states.MINTING)
            self.mint_result = self.minter.mint(self.image, self.result, owner_address)
            self._transition(states.SUCCEEDED)
            self.status.log(f"pipeline: minted explorer={self.mint_result.explorer_url}")
            return self._run(t0)

        except InvalidTransition:
            raise
        except PipelineError as e:
            return self._fail(t0, e.code, str(e))
        except Exception as e:
            return self._fail(t0, errors.ERR_UNKNOWN, f"{type(e).__name__}: {e}")
        finally:
            self.status.set_busy(False)

    def _fail(self, t0: float, code: str, message: str) -> PipelineRun:
        self.error_code = code
        self.error = message
        self.status.log(f"pipeline: error {code}: {message}")
        self._transition(states.FAILED)
        return self._run(t0)

    def _run(self, t0: float) -> PipelineRun:
        return PipelineRun(
            ok=self.state == states.SUCCEEDED,
            state=self.state,
            duration_ms=int((time.time() - t0) * 1000),
            error_code=self.error_code,
            error=self.error,
            result=self.result,
            mint_result=self.mint_result,
        )

    # ── session lifecycle ────────────────────────────────────────────────

    def reset(self):
        """Back to awaiting_capture from a terminal state; drops all session data."""
        with self._lock:
            if self.state == states.AWAITING_CAPTURE:
                return
            if self.state not in states.TERMINAL:
                raise InvalidTransition(self.state, states.AWAITING_CAPTURE)
            self._transition(states.AWAITING_CAPTURE)
            self._clear()
        self.close()
        self.status.log("pipeline: reset")

    def close(self):
        if self.camera is not None:
            self.camera.release()
