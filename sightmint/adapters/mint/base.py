from abc import ABC, abstractmethod

from sightmint.orchestrator.contracts import CapturedImage, ClassificationResult, MintResult


class MintAdapter(ABC):
    @abstractmethod
    def mint(self, image: CapturedImage, result: ClassificationResult, owner_address: str) -> MintResult:
        """Mint one sighting NFT for owner_address. Raises MintServiceError."""
        ...
