import logging
from typing import Any, Dict, Optional, Union

import httpx

from hours_filler.core.exceptions import (
    IdentityResolutionError,
    PeriodNotFoundError,
    ShiftSubmissionError,
)

logger = logging.getLogger(__name__)

EmployeeId = Union[int, str]
PeriodId = Union[int, str]

GET_CURRENT_QUERY = """query GetCurrent {
  apiCore {
    currentsConnection {
      edges {
        node {
          employee {
            id
          }
        }
      }
    }
  }
}"""


def _error_message(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    return str(exc) or exc.__class__.__name__


def _remote_message(resp: httpx.Response) -> str:
    """
    Prefer the `message` field Factorial puts in error bodies.
    Fall back to the status line when the body is not JSON or has no message.
    """
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status code {resp.status_code}"


async def get_employee_id(client: httpx.AsyncClient, cookie: str) -> EmployeeId:
    """
    Resolves the employee behind the session cookie.
    - Runs the GetCurrent GraphQL query
    - Takes the id from the first edge of currentsConnection
    Any failure here is fatal: logged, then raised as IdentityResolutionError.
    """
    try:
        resp = await client.post(
            "/graphql",
            params={"GetCurrent": ""},
            json={"query": GET_CURRENT_QUERY},
            headers={"Cookie": cookie},
        )
        resp.raise_for_status()
        data = resp.json()
        return data["data"]["apiCore"]["currentsConnection"]["edges"][0]["node"]["employee"]["id"]
    except httpx.HTTPError as exc:
        logger.error("Error getting Employee ID: %s", _error_message(exc))
        raise IdentityResolutionError(_error_message(exc)) from exc
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        logger.error("Error getting Employee ID: malformed GetCurrent response (%r)", exc)
        raise IdentityResolutionError("Employee ID not found in GetCurrent response") from exc


async def get_period_id(
    client: httpx.AsyncClient,
    month: int,
    last_month_day: str,
    cookie: str,
    employee_id: EmployeeId,
    year: int,
) -> Optional[PeriodId]:
    """
    Attendance period covering {year}-{month}-01 .. {year}-{month}-{last_month_day}.
    Failures are logged and absorbed: the caller gets None and goes on with the day.
    """
    params = {
        "year": year,
        "employee_id": employee_id,
        "month": month,
        "start_on": f"{year}-{month}-01",
        "end_on": f"{year}-{month}-{last_month_day}",
    }
    try:
        resp = await client.get(
            "/attendance/periods",
            params=params,
            headers={"Cookie": cookie},
        )
        resp.raise_for_status()
        periods = resp.json()
        if not periods:
            raise PeriodNotFoundError(month)
        return periods[0]["id"]
    except (httpx.HTTPError, PeriodNotFoundError, ValueError, KeyError, IndexError, TypeError) as exc:
        logger.error("Error getting Period ID for month %s: %s", month, _error_message(exc))
        return None


async def _send_shift(
    client: httpx.AsyncClient,
    payload: Dict[str, Any],
    cookie: str,
) -> None:
    try:
        resp = await client.post(
            "/attendance/shifts",
            json=payload,
            headers={"Cookie": cookie},
        )
    except httpx.HTTPError as exc:
        raise ShiftSubmissionError(payload["date"], _error_message(exc)) from exc

    if resp.is_error:
        raise ShiftSubmissionError(payload["date"], _remote_message(resp))


async def post_shift(
    client: httpx.AsyncClient,
    date: str,
    day: int,
    period_id: Optional[PeriodId],
    clock_in: str,
    clock_out: str,
    cookie: str,
) -> bool:
    """
    Creates one shift. Returns False (after logging) when Factorial rejects it.
    """
    payload = {
        "period_id": period_id,
        "date": date,
        "day": day,
        "clock_in": clock_in,
        "clock_out": clock_out,
    }
    try:
        await _send_shift(client, payload, cookie)
    except ShiftSubmissionError as exc:
        logger.error("Error inserting time entry for %s: %s", exc.date, exc)
        return False

    logger.info("Time entry inserted for %s: %s - %s", date, clock_in, clock_out)
    return True
