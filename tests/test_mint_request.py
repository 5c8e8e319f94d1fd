from datetime import datetime, timezone, timedelta

import pytest

from sightmint.orchestrator.contracts import ClassificationResult, MintResult, iso_timestamp
from sightmint.orchestrator.errors import NonAnimalDetected
from sightmint.orchestrator.mint_request import (
    PLACEHOLDER_IMAGE_URL, build_request, recipient_address,
)

FOX = ClassificationResult(species="Red Fox", description="A fox in a field", is_animal=True)


def test_recipient_is_chain_qualified(owner):
    request = build_request(FOX, owner)
    assert request.recipient_address == "solana:" + owner
    assert recipient_address(owner) == "solana:" + owner


def test_fixed_attribute_set():
    captured = datetime(2024, 9, 26, 22, 0, 54, 123000, tzinfo=timezone.utc)
    request = build_request(FOX, "abc", captured_at=captured)

    assert request.name == "Red Fox NFT"
    assert request.description == "A fox in a field"
    assert request.image == PLACEHOLDER_IMAGE_URL
    assert [(a.trait_type, a.value) for a in request.attributes] == [
        ("Species", "Red Fox"),
        ("Latitude", "40.7468733"),
        ("Longitude", "-73.9947449"),
        ("Time Captured", "2024-09-26T22:00:54.123Z"),
    ]


def test_provider_payload_shape():
    request = build_request(FOX, "abc", image_url="https://example.com/fox.jpg")
    payload = request.to_payload()
    assert payload["recipient"] == "solana:abc"
    assert payload["metadata"]["image"] == "https://example.com/fox.jpg"
    assert payload["metadata"]["attributes"][0] == {"trait_type": "Species", "value": "Red Fox"}
    assert len(payload["metadata"]["attributes"]) == 4


def test_non_animal_cannot_be_built():
    rock = ClassificationResult(species="Unknown", description="A rock", is_animal=False)
    with pytest.raises(NonAnimalDetected) as exc:
        build_request(rock, "abc")
    assert exc.value.description == "A rock"
    assert "doesn't appear to be an animal" in str(exc.value)


def test_owner_required():
    with pytest.raises(ValueError):
        build_request(FOX, "")


def test_iso_timestamp_normalises_to_utc():
    local = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(local) == "2024-01-01T10:00:00.000Z"
    assert iso_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"


def test_explorer_url_lookup():
    assert MintResult({"explorerUrl": "https://x"}).explorer_url == "https://x"
    assert MintResult({"onChain": {"explorerLink": "https://y"}}).explorer_url == "https://y"
    assert MintResult({"id": "1"}).explorer_url is None
