import logging

import httpx
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from hours_filler.core.deps import get_factorial_client
from hours_filler.core.exceptions import FatalError
from hours_filler.core.factorial import get_employee_id
from hours_filler.core.scheduler import fill_hours
from hours_filler.schemas.fill_hours import FillHoursRequest, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["time-entries"],
)


@router.post(
    "/fill-hours",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
    },
)
async def fill_hours_route(
    payload: FillHoursRequest,
    request: Request,
    client: httpx.AsyncClient = Depends(get_factorial_client),
):
    """
    Fills Factorial shifts for every working day of [dateFrom, dateTo].
    Flow:
    1) Resolve the employee from the cookie (fatal on failure -> 500)
    2) Walk the days and submit each slot. Per-day failures only show up in the logs
    3) 200 once the whole range has been walked
    """
    try:
        employee_id = await get_employee_id(client, payload.cookie)
        logger.info("Starting time entry process for employee %s", employee_id)

        summary = await fill_hours(
            client,
            cookie=payload.cookie,
            employee_id=employee_id,
            date_from=payload.dateFrom,
            date_to=payload.dateTo,
            hours_mon_thurs=payload.hoursMonThurs,
            hours_fri=payload.hoursFri,
            holidays=payload.holidays,
            year=request.app.state.holidays_year,
        )
    except FatalError as exc:
        logger.error("Fatal error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Fatal error: {exc}"},
        )

    logger.info(
        "Process completed: %s working days, %s skipped, %s shifts inserted, %s failed",
        summary.working_days,
        summary.skipped_days,
        summary.submitted_shifts,
        summary.failed_shifts,
    )
    return MessageResponse(message="Time entry process completed successfully!")
