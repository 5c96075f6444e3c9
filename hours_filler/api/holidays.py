from typing import List

from fastapi import APIRouter, Request

router = APIRouter(
    prefix="/holidays",
    tags=["holidays"],
)


@router.get(
    "",
    response_model=List[str],
)
async def list_holidays(request: Request):
    """
    Fixed national holidays of the process year (built at startup).
    Not linked to the `holidays` field that /fill-hours receives.
    """
    return request.app.state.static_holidays
