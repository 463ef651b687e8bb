import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status

from fuzepicker.api.models.element import SelectorRequest, SelectorResponse
from fuzepicker.api.services.selector_service import build_selector_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/selectors", tags=["selectors"])


@router.post("", response_model=SelectorResponse)
async def compute_selectors(request: SelectorRequest) -> Any:
    try:
        logger.info(f"API request: Compute selectors for locator '{request.locator}'")
        return build_selector_response(request.html, request.locator)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Critical error in compute_selectors for '{request.locator}': {str(e)}")
        logger.error(f"Error type: {type(e).__name__}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
