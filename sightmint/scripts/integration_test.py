"""
Integration test script: walks a running server through a full session.

Usage:
    python sightmint/scripts/fake_crossmint_server.py                      (terminal 1)
    CAMERA_ADAPTER=mock CLASSIFIER_ADAPTER=mock \
      CROSSMINT_BASE_URL=http://127.0.0.1:9100 CROSSMINT_API_KEY=test \
      sightmint                                                              (terminal 2)
    python sightmint/scripts/integration_test.py                            (terminal 3)
"""

import base64
import sys

import cv2
import httpx
import numpy as np

BASE = "http://localhost:8000"
TIMEOUT = 60.0
OWNER = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
passed = 0
failed = 0


def _sample_data_url() -> str:
    img = np.zeros((64, 64, 3), dtype=np.uint8)
    img[16:48, 16:48] = (0, 128, 255)
    ok, buf = cv2.imencode(".jpg", img)
    return "data:image/jpeg;base64," + base64.b64encode(buf.tobytes()).decode("ascii")


def test(name: str, method: str, path: str, body: dict | None = None,
         checks: dict | None = None, status_code: int = 200):
    global passed, failed
    url = f"{BASE}{path}"
    checks = checks or {}
    try:
        if method == "GET":
            r = httpx.get(url, timeout=TIMEOUT)
        else:
            r = httpx.post(url, json=body or {}, timeout=TIMEOUT)

        if r.status_code != status_code:
            print(f"  FAIL  {name} — HTTP {r.status_code}")
            failed += 1
            return None

        data = r.json()
        for key, expected in checks.items():
            actual = data.get(key)
            if actual != expected:
                print(f"  FAIL  {name} — {key}: expected {expected!r}, got {actual!r}")
                failed += 1
                return data

        print(f"  OK    {name}")
        passed += 1
        return data

    except httpx.ConnectError:
        print(f"  FAIL  {name} — connection refused (is the server running?)")
        failed += 1
    except Exception as e:
        print(f"  FAIL  {name} — {type(e).__name__}: {e}")
        failed += 1
    return None


def main():
    image = _sample_data_url()
    print(f"\nIntegration tests against {BASE}\n")
    print("--- Health & Status ---")
    test("GET /health", "GET", "/health", None, {"api": True})
    test("GET /status", "GET", "/status", None, {"state": "awaiting_capture"})

    print("\n--- Guards ---")
    test("POST /confirm before capture", "POST", "/confirm",
         {"publicKey": OWNER}, {"ok": False}, status_code=409)
    test("POST /upload not an image", "POST", "/upload",
         {"image": "aGVsbG8=", "mime_type": "image/png"}, {"ok": False, "state": "awaiting_capture"})

    print("\n--- Session ---")
    test("POST /upload", "POST", "/upload", {"image": image}, {"ok": True, "state": "ready_to_classify"})
    test("POST /confirm", "POST", "/confirm", {"publicKey": OWNER}, {"ok": True, "state": "succeeded"})
    test("POST /reset", "POST", "/reset", {}, {"ok": True, "state": "awaiting_capture"})
    test("POST /capture (mock camera)", "POST", "/capture")

    print("\n--- Mint boundary ---")
    test("POST /mint", "POST", "/mint",
         {"image": image, "species": "Red Fox", "description": "A fox", "publicKey": OWNER})
    test("POST /mint missing owner", "POST", "/mint",
         {"image": image, "species": "Red Fox", "description": "A fox"}, status_code=422)

    total = passed + failed
    print(f"\n{'='*40}")
    print(f"  {passed}/{total} passed, {failed} failed")
    print(f"{'='*40}\n")

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
