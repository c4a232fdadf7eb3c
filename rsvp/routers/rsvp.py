from fastapi import APIRouter, Depends, status

from ..dependencies import get_submission_service
from ..schemas.common import (
    ConfigOption,
    ConfigResponse,
    ErrorResponse,
    ResponseFactory,
    SuccessResponse,
)
from ..schemas.enums import Attendance
from ..schemas.rsvp import RSVPRecord, RSVPSubmission
from ..services import RSVPSubmissionService
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["rsvp"])

ATTENDANCE_LABELS = {
    Attendance.YES: "Sí, asistiré",
    Attendance.NO: "No podré asistir",
}


@router.post(
    "",
    response_model=SuccessResponse[RSVPRecord],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
@handle_service_errors
async def submit_rsvp(
    submission: RSVPSubmission,
    service: RSVPSubmissionService = Depends(get_submission_service),
):
    """Submit an RSVP. Attendees must include phone and cédula."""
    record = service.submit(submission)
    return ResponseFactory.created(data=record, message=ResponseMessages.RSVP_CREATED)


@router.get(
    "/config/attendance-options", response_model=SuccessResponse[ConfigResponse]
)
async def get_attendance_options():
    """Get available attendance answers for the form"""
    options = [
        ConfigOption(value=option.value, label=ATTENDANCE_LABELS[option])
        for option in Attendance
    ]

    return ResponseFactory.success(
        data=ConfigResponse(
            options=options, total_count=len(options), category="attendance"
        )
    )
