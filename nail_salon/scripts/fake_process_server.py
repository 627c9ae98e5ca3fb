"""
Fake image-processing server for testing HttpUpload without the real service.

Serves POST /process-image on port 5000: logs the color field, sleeps
briefly (simulating processing), and returns the uploaded image unchanged.
Set FAKE_FAIL_STATUS=500 (or any code) to make every request fail with it.

Usage:
    python nail_salon/scripts/fake_process_server.py
"""

import os
import time
import uvicorn
from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import Response

app = FastAPI(title="fake-process-server")

_DELAY_S = float(os.getenv("FAKE_DELAY", "0.8"))


@app.post("/process-image")
def process_image(image: UploadFile = File(...), color: str = Form(...)):
    data = image.file.read()
    print(f"[proc] {image.filename} ({len(data)} bytes) color={color}")
    fail = os.getenv("FAKE_FAIL_STATUS")
    if fail:
        print(f"[proc] failing with HTTP {fail}")
        return Response(status_code=int(fail))
    time.sleep(_DELAY_S)
    print("[proc] done")
    return Response(content=data, media_type=image.content_type or "application/octet-stream")


@app.get("/process-image")
def probe():
    return {"ok": True, "state": "idle"}


if __name__ == "__main__":
    print("Fake process server starting on http://localhost:5000")
    uvicorn.run(app, host="0.0.0.0", port=5000)
