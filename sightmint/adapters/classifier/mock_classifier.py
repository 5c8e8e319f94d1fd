from sightmint.adapters.classifier.base import ClassifierAdapter
from sightmint.orchestrator.contracts import CapturedImage
from sightmint.orchestrator.errors import ClassificationServiceError

DEFAULT_RESPONSE = "Animal: Red Fox\nDescription: A fox standing in a field"


class MockClassifier(ClassifierAdapter):
    """Returns a scripted answer, or raises a scripted service error."""

    def __init__(self, status_store, response: str = DEFAULT_RESPONSE, error: str | None = None):
        self.status = status_store
        self.response = response
        self.error = error
        self.calls: list[CapturedImage] = []

    def classify(self, image: CapturedImage) -> str:
        self.calls.append(image)
        if self.error is not None:
            self.status.log(f"mock_classifier: error {self.error}")
            raise ClassificationServiceError(self.error)
        self.status.log(f"mock_classifier: {self.response!r}")
        return self.response
