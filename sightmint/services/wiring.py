"""Builds adapters and the pipeline from Settings. Nothing here is a module-level singleton."""
from sightmint.adapters.camera.base import CameraAdapter
from sightmint.adapters.classifier.base import ClassifierAdapter
from sightmint.adapters.mint.base import MintAdapter
from sightmint.adapters.mint.crossmint_mint import CrossmintMinter
from sightmint.orchestrator.state_machine import Pipeline
from sightmint.services.settings import Settings


def build_camera(settings: Settings, status) -> CameraAdapter:
    if settings.camera_adapter == "mock":
        from sightmint.adapters.camera.mock_camera import MockCamera
        status.log(f"camera: MockCamera (samples={settings.mock_camera_dir})")
        return MockCamera(status, samples_dir=settings.mock_camera_dir)

    from sightmint.adapters.camera.cv2_camera import CV2Camera
    status.log(f"camera: CV2Camera device {settings.camera_index}")
    return CV2Camera(status, index=settings.camera_index)


def build_classifier(settings: Settings, status) -> ClassifierAdapter:
    name = settings.classifier_adapter
    if name == "claude":
        from sightmint.adapters.classifier.claude_classifier import ClaudeClassifier
        classifier = ClaudeClassifier(status, settings.anthropic_api_key, model=settings.claude_model)
    elif name == "mock":
        from sightmint.adapters.classifier.mock_classifier import MockClassifier
        classifier = MockClassifier(status)
    else:
        from sightmint.adapters.classifier.gemini_classifier import GeminiClassifier
        classifier = GeminiClassifier(
            status, settings.gemini_api_key, model=settings.gemini_model, timeout=settings.http_timeout,
        )
    status.log(f"classifier adapter: {type(classifier).__name__}")
    return classifier


def build_mint_service(settings: Settings, status) -> CrossmintMinter:
    return CrossmintMinter(
        status,
        settings.crossmint_api_key,
        env=settings.crossmint_env,
        api_version=settings.crossmint_api_version,
        chain=settings.chain,
        base_url=settings.crossmint_base_url,
        image_url=settings.mint_image_url,
        use_captured_image=settings.mint_use_captured_image,
        timeout=settings.http_timeout,
    )


def build_minter(settings: Settings, status, mint_service: CrossmintMinter | None = None) -> MintAdapter:
    name = settings.mint_adapter
    if name == "http":
        from sightmint.adapters.mint.http_mint import HttpMintClient
        minter = HttpMintClient(status, base_url=settings.mint_service_url, timeout=settings.http_timeout)
        status.log(f"mint adapter: http -> {settings.mint_service_url}")
        return minter
    if name == "mock":
        from sightmint.adapters.mint.mock_mint import MockMinter
        status.log("mint adapter: mock")
        return MockMinter(status)
    status.log(f"mint adapter: crossmint ({settings.crossmint_env})")
    return mint_service or build_mint_service(settings, status)


def build_pipeline(settings: Settings, status, mint_service: CrossmintMinter | None = None) -> Pipeline:
    return Pipeline(
        camera=build_camera(settings, status),
        classifier=build_classifier(settings, status),
        minter=build_minter(settings, status, mint_service),
        status_store=status,
    )
