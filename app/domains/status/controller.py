"""Status API controller."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db, require_gateway_token
from app.domains.status.service import StatusService
from app.schemas.status import StatusResponse

router = APIRouter(tags=["status"])


@router.get(
    "/status",
    response_model=StatusResponse,
    dependencies=[Depends(require_gateway_token)],
)
async def get_status(db: AsyncSession = Depends(get_db)):
    """Return the most recent completion status.

    Requires the shared bearer token.
    """
    return await StatusService(db).get_status()
