from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, StringConstraints

from sightmint.orchestrator.states import PipelineState

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class MintNftRequest(BaseModel):
    image: str                          # data URL of the captured photo
    species: NonBlankStr
    description: str = ""
    publicKey: NonBlankStr
    capturedAt: Optional[datetime] = None   # falls back to request time


class MintErrorResponse(BaseModel):
    error: str


class UploadRequest(BaseModel):
    image: str                          # data URL, or bare base64 with mime_type
    mime_type: Optional[str] = None


class ConfirmRequest(BaseModel):
    publicKey: NonBlankStr


class ClassificationOut(BaseModel):
    species: str
    description: str
    is_animal: bool


class CaptureResponse(BaseModel):
    ok: bool
    state: PipelineState
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class ConfirmResponse(BaseModel):
    ok: bool
    state: PipelineState
    duration_ms: int
    error_code: Optional[str] = None
    error: Optional[str] = None
    classification: Optional[ClassificationOut] = None
    nft: Optional[dict] = None          # provider payload, unmodified
    explorer_url: Optional[str] = None


class StatusResponse(BaseModel):
    busy: bool
    state: PipelineState
    history: list[str]
    has_image: bool
    classification: Optional[ClassificationOut] = None
    nft: Optional[dict] = None
    explorer_url: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    logs: list[str]
