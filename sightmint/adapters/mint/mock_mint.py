import uuid

from sightmint.adapters.mint.base import MintAdapter
from sightmint.orchestrator.contracts import CapturedImage, ClassificationResult, MintResult
from sightmint.orchestrator.errors import MintServiceError
from sightmint.orchestrator.mint_request import build_request


class MockMinter(MintAdapter):
    """Builds the real request but never leaves the process."""

    def __init__(self, status_store, error: str | None = None):
        self.status = status_store
        self.error = error
        self.requests = []

    def mint(self, image: CapturedImage, result: ClassificationResult, owner_address: str) -> MintResult:
        request = build_request(result, owner_address, captured_at=image.captured_at)
        self.requests.append(request)
        if self.error is not None:
            self.status.log(f"mock_mint: error {self.error}")
            raise MintServiceError(self.error)
        nft_id = str(uuid.uuid4())
        self.status.log(f"mock_mint: minted {request.name} id={nft_id[:8]}")
        return MintResult(payload={
            "id": nft_id,
            "onChain": {"status": "pending", "chain": "solana"},
            "explorerUrl": f"https://explorer.solana.com/address/{nft_id}?cluster=devnet",
        })
