from fastapi import APIRouter, Depends

from ..dependencies import get_listing_service
from ..schemas.common import ErrorResponse, ResponseFactory, SuccessResponse
from ..schemas.rsvp import RSVPListing
from ..services import RSVPListingService
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["admin"])


@router.get(
    "/rsvps",
    response_model=SuccessResponse[RSVPListing],
    responses={502: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
@handle_service_errors
async def list_rsvps(
    service: RSVPListingService = Depends(get_listing_service),
):
    """All confirmations, newest first, with attending/not attending counts"""
    listing = service.get_listing()
    return ResponseFactory.success(
        data=listing, message=ResponseMessages.RSVPS_RETRIEVED
    )
