from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import FormatResponse, HealthResponse
from .normalize import normalize_conf_bytes
from .rules import CONF_SUFFIX

app = FastAPI(
    title="hoconfmt",
    description="Leading-indentation normalization for HOCON configuration files",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/format", response_model=FormatResponse)
async def format_conf(file: UploadFile = File(...), diff: bool = False):
    if not file.filename or not file.filename.lower().endswith(CONF_SUFFIX):
        raise HTTPException(status_code=422, detail="Only .conf files are supported")

    raw = await file.read()
    return normalize_conf_bytes(raw, file.filename, with_diff=diff)
