"""Status service."""

from sqlalchemy.ext.asyncio import AsyncSession

from app import queries
from app.schemas.status import StatusResponse


class StatusService:
    """Reads the singleton status row."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_status(self) -> StatusResponse:
        status = await queries.get_status(self.db)
        return StatusResponse.model_validate(status)
