from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])

@router.get("/")
async def root():
    return {"message": "Welcome to Mon A.I API"}

@router.get("/api/health")
async def health_check(request: Request):
    settings = request.app.state.settings
    return {
        "status": "ok",
        "version": settings.VERSION,
        "translator_configured": request.app.state.translator.configured,
    }

@router.get("/debug-key", response_class=PlainTextResponse)
async def debug_key(request: Request):
    """Report whether the translation credential is loaded, never its value."""
    return "YES" if request.app.state.translator.configured else "NO"
