"""
FastAPI REST API Interface
Programmatic access to Cryptoscope for automation and integration
"""

from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from cryptoscope import __version__
from cryptoscope.core.engine import CryptoscopeEngine
from cryptoscope.core.errors import CryptoscopeError
from cryptoscope.core.loader import ChallengeLoader, DECODERS
from cryptoscope.core.presets import PresetLibrary
from cryptoscope.utils.report_generator import ReportGenerator


# Initialize FastAPI app
app = FastAPI(
    title="Cryptoscope API",
    description="Classical cipher cryptanalysis and byte encoding toolkit",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _loader(encoding: str) -> ChallengeLoader:
    if encoding not in DECODERS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown encoding: {encoding}. Available: {sorted(DECODERS)}"
        )
    return ChallengeLoader(encoding)


def _engine(preset: str) -> CryptoscopeEngine:
    if PresetLibrary.get_preset(preset) is None:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown preset: {preset}. Available: {PresetLibrary.list_presets()}"
        )
    return CryptoscopeEngine(preset=preset)


def _respond(result, include_report: bool) -> JSONResponse:
    response_data = result.to_dict()
    if include_report:
        response_data['markdown_report'] = ReportGenerator().generate_markdown(result, result.operation)
    return JSONResponse(content=response_data)


@app.get("/")
async def root():
    """
    API root endpoint - health check and info
    """
    return {
        "service": "Cryptoscope API",
        "version": __version__,
        "status": "operational",
        "endpoints": {
            "convert": "/convert",
            "break_single": "/break/single",
            "detect_single": "/detect/single",
            "break_repeating": "/break/repeating",
            "detect_ecb": "/detect/ecb",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring
    """
    return {
        "status": "healthy",
        "service": "cryptoscope-api",
        "version": __version__
    }


@app.post("/convert")
async def convert(
    data: str = Form(..., description="Encoded input"),
    encoding: Optional[str] = Form("hex", description="Input encoding: hex, base64 or text")
):
    """
    Transcode input to hex, base64 and text

    Example:
    ```bash
    curl -X POST "http://localhost:8000/convert" -F "data=4d616e"
    ```
    """
    loader = _loader(encoding)
    try:
        result = CryptoscopeEngine().convert(loader.parse_blob(data))
    except CryptoscopeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(result, include_report=False)


@app.post("/break/single")
async def break_single(
    data: str = Form(..., description="Ciphertext"),
    encoding: Optional[str] = Form("hex", description="Input encoding"),
    include_report: Optional[bool] = Form(False, description="Include markdown report")
):
    """
    Brute force a single-byte XOR key
    """
    loader = _loader(encoding)
    try:
        result = CryptoscopeEngine().break_single_byte(loader.parse_blob(data))
    except CryptoscopeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(result, include_report)


@app.post("/detect/single")
async def detect_single(
    data: str = Form(..., description="Ciphertexts, one per line"),
    encoding: Optional[str] = Form("hex", description="Input encoding"),
    include_report: Optional[bool] = Form(False, description="Include markdown report")
):
    """
    Find which line was encrypted with single-byte XOR
    """
    loader = _loader(encoding)
    try:
        result = CryptoscopeEngine().detect_single_byte(loader.parse_lines(data))
    except CryptoscopeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(result, include_report)


@app.post("/break/repeating")
async def break_repeating(
    data: str = Form(..., description="Ciphertext"),
    encoding: Optional[str] = Form("base64", description="Input encoding"),
    preset: Optional[str] = Form("default", description="Breaker preset"),
    include_report: Optional[bool] = Form(False, description="Include markdown report")
):
    """
    Recover a repeating XOR key

    Example:
    ```bash
    curl -X POST "http://localhost:8000/break/repeating" \
         -F "data=<6.txt" -F "preset=thorough"
    ```
    """
    loader = _loader(encoding)
    engine = _engine(preset)
    try:
        result = engine.break_repeating_key(loader.parse_blob(data))
    except CryptoscopeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(result, include_report)


@app.post("/detect/ecb")
async def detect_ecb(
    data: str = Form(..., description="Ciphertexts, one per line"),
    encoding: Optional[str] = Form("hex", description="Input encoding"),
    include_report: Optional[bool] = Form(False, description="Include markdown report")
):
    """
    Rank ciphertexts by duplicate 16-byte blocks
    """
    loader = _loader(encoding)
    try:
        result = CryptoscopeEngine().detect_ecb(loader.parse_lines(data))
    except CryptoscopeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(result, include_report)


# Run server with: uvicorn cryptoscope.interfaces.api:app --reload --host 0.0.0.0 --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
