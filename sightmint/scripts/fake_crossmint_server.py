"""
Fake Crossmint server for exercising CrossmintMinter without a real API key.

Simulates the provider's mint endpoint on port 9100. Set FAKE_MINT_ERROR to
make every mint fail with that message (HTTP 500).

Usage:
    python sightmint/scripts/fake_crossmint_server.py
    CROSSMINT_BASE_URL=http://127.0.0.1:9100 CROSSMINT_API_KEY=test sightmint
"""

import os
import uuid

import uvicorn
from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

app = FastAPI(title="fake-crossmint-server")


@app.post("/api/{version}/collections/default/nfts")
async def mint(version: str, request: Request, x_api_key: str | None = Header(default=None)):
    body = await request.json()
    if not x_api_key:
        return JSONResponse(status_code=401, content={"message": "Missing x-api-key header"})

    error = os.getenv("FAKE_MINT_ERROR")
    if error:
        print(f"[crossmint] failing mint: {error}")
        return JSONResponse(status_code=500, content={"error": error})

    recipient = body.get("recipient", "")
    name = body.get("metadata", {}).get("name")
    nft_id = str(uuid.uuid4())
    print(f"[crossmint] {version} mint '{name}' -> {recipient} id={nft_id}")
    return {
        "id": nft_id,
        "actionId": nft_id,
        "onChain": {"status": "pending", "chain": recipient.split(":", 1)[0]},
        "explorerUrl": f"https://explorer.solana.com/address/{nft_id}?cluster=devnet",
    }


if __name__ == "__main__":
    print("Fake Crossmint server starting on http://localhost:9100")
    uvicorn.run(app, host="0.0.0.0", port=9100)
