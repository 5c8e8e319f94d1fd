"""
Crossmint minting adapter (server side).

Holds the provider API key; it must only ever run behind the /mint endpoint
or in-process on the server, never in the capture/classify client.

Contract:
  Request:  POST {base}/api/{version}/collections/default/nfts
            x-api-key: <key>
            {"recipient": "solana:<addr>", "metadata": {...}}
  Response: provider payload (forwarded unmodified)
            or non-2xx with {"message": "..."} / {"error": "..."}
"""
from datetime import datetime

import httpx

from sightmint.adapters.mint.base import MintAdapter
from sightmint.orchestrator.contracts import (
    CapturedImage, ClassificationResult, MintRequest, MintResult,
)
from sightmint.orchestrator.errors import MintServiceError, GENERIC_MINT_MESSAGE
from sightmint.orchestrator.mint_request import CHAIN, PLACEHOLDER_IMAGE_URL, build_request

CROSSMINT_ENV = "staging"
CROSSMINT_API_VERSION = "2022-06-09"


class CrossmintMinter(MintAdapter):
    def __init__(
        self,
        status_store,
        api_key: str | None,
        env: str = CROSSMINT_ENV,
        api_version: str = CROSSMINT_API_VERSION,
        chain: str = CHAIN,
        base_url: str | None = None,
        image_url: str = PLACEHOLDER_IMAGE_URL,
        use_captured_image: bool = False,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        self.status = status_store
        self._api_key = api_key
        self.env = env
        self.api_version = api_version
        self.chain = chain
        self.base_url = (base_url or f"https://{env}.crossmint.com").rstrip("/")
        self.image_url = image_url
        self.use_captured_image = use_captured_image
        self._http = client or httpx.Client(timeout=timeout)
        if not self._api_key:
            self.status.log("crossmint: CROSSMINT_API_KEY not set")

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/{self.api_version}/collections/default/nfts"

    def build(self, result: ClassificationResult, owner_address: str, *,
              image_data_url: str | None = None, captured_at: datetime | None = None) -> MintRequest:
        # placeholder image unless MINT_USE_CAPTURED_IMAGE is on
        image_url = image_data_url if (self.use_captured_image and image_data_url) else self.image_url
        return build_request(
            result,
            owner_address,
            image_url=image_url,
            captured_at=captured_at,
            chain=self.chain,
        )

    def mint(self, image: CapturedImage, result: ClassificationResult, owner_address: str) -> MintResult:
        request = self.build(
            result,
            owner_address,
            image_data_url=image.to_data_url() if self.use_captured_image else None,
            captured_at=image.captured_at,
        )
        return self.submit(request)

    def submit(self, request: MintRequest) -> MintResult:
        if not self._api_key:
            raise MintServiceError("CROSSMINT_API_KEY not set")

        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self._api_key,
        }
        self.status.log(f"crossmint: minting '{request.name}' for {request.recipient_address}")
        try:
            resp = self._http.post(self.url, json=request.to_payload(), headers=headers)
        except httpx.HTTPError as e:
            self.status.log(f"crossmint: transport error: {e}")
            raise MintServiceError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            message = _provider_message(_json_or_empty(resp)) or GENERIC_MINT_MESSAGE
            self.status.log(f"crossmint: HTTP {resp.status_code}: {message}")
            raise MintServiceError(message)

        try:
            data = resp.json()
        except ValueError as e:
            self.status.log(f"crossmint: HTTP {resp.status_code} with non-JSON body {resp.text[:200]!r}")
            raise MintServiceError(GENERIC_MINT_MESSAGE) from e
        if not isinstance(data, dict):
            self.status.log(f"crossmint: unexpected response body {resp.text[:200]!r}")
            raise MintServiceError(GENERIC_MINT_MESSAGE)

        self.status.log(f"crossmint: minted id={data.get('id')}")
        return MintResult(payload=data)


def _json_or_empty(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return {}


def _provider_message(data) -> str | None:
    if not isinstance(data, dict):
        return None
    message = data.get("message") or data.get("error")
    return message if isinstance(message, str) else None
