import logging
from typing import Dict

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> Dict[str, str]:
    logger.debug("Health check requested")
    return {
        "status": "healthy",
        "service": "selectors",
        "message": "Selector API is operational",
    }
