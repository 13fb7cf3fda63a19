from fastapi import APIRouter, Request

from app.models.contact import PingResponse

router = APIRouter()

LIVE_MESSAGE = "🚀 Backend is live!"


@router.get("/ping", response_model=PingResponse)
async def ping(request: Request):
    """Liveness plus the last known MongoDB and email transporter status. Performs no I/O."""
    return PingResponse(success=True, message=LIVE_MESSAGE, **request.app.state.status.snapshot())
