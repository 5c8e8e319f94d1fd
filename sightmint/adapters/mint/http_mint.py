"""
HTTP client for the /mint endpoint.

Used by a capture/classify front-end that must not hold the provider key.
  Request:  POST /mint {"image": dataURL, "species", "description", "publicKey", "capturedAt"}
  Response: provider payload, or non-200 with {"error": "..."}
"""
import httpx

from sightmint.adapters.mint.base import MintAdapter
from sightmint.orchestrator.contracts import (
    CapturedImage, ClassificationResult, MintResult, iso_timestamp,
)
from sightmint.orchestrator.errors import MintServiceError, GENERIC_MINT_MESSAGE


class HttpMintClient(MintAdapter):
    def __init__(self, status_store, base_url: str = "http://127.0.0.1:8000",
                 client: httpx.Client | None = None, timeout: float = 30.0):
        self.status = status_store
        self.base_url = base_url.rstrip("/")
        self._http = client or httpx.Client(timeout=timeout)

    def mint(self, image: CapturedImage, result: ClassificationResult, owner_address: str) -> MintResult:
        body = {
            "image": image.to_data_url(),
            "species": result.species,
            "description": result.description,
            "publicKey": owner_address,
            "capturedAt": iso_timestamp(image.captured_at),
        }
        url = f"{self.base_url}/mint"
        self.status.log(f"http_mint: POST /mint species={result.species}")
        try:
            resp = self._http.post(url, json=body)
        except httpx.HTTPError as e:
            self.status.log(f"http_mint: transport error: {e}")
            raise MintServiceError(str(e) or type(e).__name__) from e

        if resp.status_code != 200:
            try:
                data = resp.json()
            except ValueError:
                data = {}
            message = data.get("error") if isinstance(data, dict) else None
            message = message if isinstance(message, str) and message else GENERIC_MINT_MESSAGE
            self.status.log(f"http_mint: HTTP {resp.status_code}: {message}")
            raise MintServiceError(message)

        try:
            data = resp.json()
        except ValueError as e:
            self.status.log(f"http_mint: non-JSON body {resp.text[:200]!r}")
            raise MintServiceError(GENERIC_MINT_MESSAGE) from e
        if not isinstance(data, dict):
            self.status.log(f"http_mint: unexpected response body {resp.text[:200]!r}")
            raise MintServiceError(GENERIC_MINT_MESSAGE)

        self.status.log("http_mint: done")
        return MintResult(payload=data)
