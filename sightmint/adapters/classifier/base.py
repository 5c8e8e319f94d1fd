from abc import ABC, abstractmethod

from sightmint.orchestrator.contracts import CapturedImage

SYSTEM_INSTRUCTION = (
    "Return what animal specie the picture is, followed by a description of the image.\n\n"
    "Output Format:\n"
    "Animal: [animal specie]\n"
    "Description: [image description]\n\n"
    'If there is no animal, return "No Animal"\n\n'
)

USER_PROMPT = (
    "Analyze this image and tell me what animal species it is, "
    "followed by a description of the image."
)


class ClassifierAdapter(ABC):
    @abstractmethod
    def classify(self, image: CapturedImage) -> str:
        """Return the service's raw text. Raises ClassificationServiceError."""
        ...
