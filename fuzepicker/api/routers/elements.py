import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status

from fuzepicker.api.models.element import CaptureRequest, CaptureResponse
from fuzepicker.api.services.selector_service import build_capture_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/elements", tags=["elements"])


@router.post("/capture", response_model=CaptureResponse)
async def capture(request: CaptureRequest) -> Any:
    try:
        logger.info(f"API request: Capture element '{request.locator}' from {request.page_url or 'unknown page'}")
        return build_capture_response(request.html, request.locator, request.page_url)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Critical error in capture for '{request.locator}': {str(e)}")
        logger.error(f"Error type: {type(e).__name__}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
