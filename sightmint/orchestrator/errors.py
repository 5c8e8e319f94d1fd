ERR_BUSY = "BUSY"
ERR_CAPTURE = "CAPTURE_FAILED"
ERR_CLASSIFY = "CLASSIFICATION_FAILED"
ERR_NON_ANIMAL = "NON_ANIMAL"
ERR_MINT = "MINT_FAILED"
ERR_INVALID_STATE = "INVALID_STATE"
ERR_UNKNOWN = "UNKNOWN"

NON_ANIMAL_MESSAGE = (
    "This doesn't appear to be an animal. Please try again with an animal photo."
    "\n\nDescription: {description}"
)
GENERIC_MINT_MESSAGE = "Failed to mint NFT"


class PipelineError(Exception):
    code = ERR_UNKNOWN


class CaptureError(PipelineError):
    """No camera frame available, or the supplied bytes are not an image."""
    code = ERR_CAPTURE


class ClassificationServiceError(PipelineError):
    code = ERR_CLASSIFY


class NonAnimalDetected(PipelineError):
    """Classifier saw no animal. A policy branch, not a service fault."""
    code = ERR_NON_ANIMAL

    def __init__(self, description: str = ""):
        self.description = description
        super().__init__(NON_ANIMAL_MESSAGE.format(description=description))


class MintServiceError(PipelineError):
    code = ERR_MINT

    def __init__(self, message: str = GENERIC_MINT_MESSAGE):
        super().__init__(message or GENERIC_MINT_MESSAGE)


class InvalidTransition(PipelineError):
    code = ERR_INVALID_STATE

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"cannot move from {current} to {target}")
