from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sightmint.adapters.camera.file_source import parse_data_url
from sightmint.adapters.mint.crossmint_mint import CrossmintMinter
from sightmint.orchestrator import errors
from sightmint.orchestrator.contracts import ClassificationResult, MintResult
from sightmint.orchestrator.errors import CaptureError, InvalidTransition, MintServiceError
from sightmint.orchestrator.state_machine import Pipeline
from sightmint.services.models import (
    MintNftRequest, MintErrorResponse, UploadRequest, ConfirmRequest,
    ClassificationOut, CaptureResponse, ConfirmResponse, StatusResponse,
)
from sightmint.services.settings import Settings
from sightmint.services.status_store import StatusStore
from sightmint.services.wiring import build_mint_service, build_pipeline


def _classification_out(result: ClassificationResult | None) -> ClassificationOut | None:
    if result is None:
        return None
    return ClassificationOut(species=result.species, description=result.description, is_animal=result.is_animal)


def _nft_fields(mint_result: MintResult | None) -> dict:
    if mint_result is None:
        return {"nft": None, "explorer_url": None}
    return {"nft": mint_result.payload, "explorer_url": mint_result.explorer_url}


def create_app(
    settings: Settings | None = None,
    pipeline: Pipeline | None = None,
    mint_service: CrossmintMinter | None = None,
    status: StatusStore | None = None,
) -> FastAPI:
    if settings is None:
        load_dotenv(override=False)
        settings = Settings.from_env()
    status = status or StatusStore()
    mint_service = mint_service or build_mint_service(settings, status)
    pipeline = pipeline or build_pipeline(settings, status, mint_service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # session teardown: give the camera back
        pipeline.close()

    app = FastAPI(title="sightmint", lifespan=lifespan)
    app.state.settings = settings
    app.state.status = status
    app.state.pipeline = pipeline
    app.state.mint_service = mint_service

    @app.exception_handler(InvalidTransition)
    async def invalid_transition(request: Request, exc: InvalidTransition):
        code = errors.ERR_BUSY if status.busy else exc.code
        status.log(f"rejected {request.url.path}: {exc}")
        return JSONResponse(
            status_code=409,
            content={"ok": False, "state": pipeline.state, "error": str(exc), "error_code": code},
        )

    # ===== Mint boundary (server-held API key) =====

    @app.post("/mint", responses={500: {"model": MintErrorResponse}})
    def mint_nft(req: MintNftRequest):
        status.log(f"MINT: species={req.species!r} owner={req.publicKey}")
        result = ClassificationResult(species=req.species, description=req.description, is_animal=True)
        try:
            request = mint_service.build(
                result, req.publicKey, image_data_url=req.image, captured_at=req.capturedAt,
            )
            minted = mint_service.submit(request)
        except MintServiceError as e:
            status.log(f"MINT failed: {e}")
            return JSONResponse(status_code=500, content={"error": str(e)})
        return JSONResponse(content=minted.payload)

    # ===== Pipeline session =====

    @app.get("/status", response_model=StatusResponse)
    def get_status():
        return StatusResponse(
            busy=status.busy,
            state=pipeline.state,
            history=list(pipeline.history),
            has_image=pipeline.image is not None,
            classification=_classification_out(pipeline.result),
            error=pipeline.error,
            error_code=pipeline.error_code,
            logs=status.logs,
            **_nft_fields(pipeline.mint_result),
        )

    @app.post("/capture", response_model=CaptureResponse)
    def capture():
        try:
            image = pipeline.capture()
        except CaptureError as e:
            return CaptureResponse(ok=False, state=pipeline.state, error=str(e), error_code=e.code)
        return CaptureResponse(ok=True, state=pipeline.state, mime_type=image.mime_type, size_bytes=len(image.data))

    @app.post("/upload", response_model=CaptureResponse)
    def upload(req: UploadRequest):
        try:
            data, mime_type = parse_data_url(req.image, req.mime_type)
            image = pipeline.import_file(data, mime_type)
        except CaptureError as e:
            status.log(f"UPLOAD rejected: {e}")
            return CaptureResponse(ok=False, state=pipeline.state, error=str(e), error_code=e.code)
        return CaptureResponse(ok=True, state=pipeline.state, mime_type=image.mime_type, size_bytes=len(image.data))

    @app.post("/confirm", response_model=ConfirmResponse)
    def confirm(req: ConfirmRequest):
        run = pipeline.confirm(req.publicKey)
        return ConfirmResponse(
            ok=run.ok,
            state=run.state,
            duration_ms=run.duration_ms,
            error_code=run.error_code,
            error=run.error,
            classification=_classification_out(run.result),
            **_nft_fields(run.mint_result),
        )

    @app.post("/reset")
    def reset():
        pipeline.reset()
        return {"ok": True, "state": pipeline.state}

    @app.get("/health")
    def health():
        return {
            "api": True,
            "state": pipeline.state,
            "camera": type(pipeline.camera).__name__,
            "classifier": type(pipeline.classifier).__name__,
            "minter": type(pipeline.minter).__name__,
            "mint_key_configured": bool(settings.crossmint_api_key),
            "mint_env": settings.crossmint_env,
        }

    return app


def main():
    uvicorn.run("sightmint.services.api:create_app", factory=True, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
