import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Collection, Iterator, List

import httpx

from hours_filler.core.factorial import EmployeeId, get_period_id, post_shift
from hours_filler.schemas.fill_hours import TimeSlot

logger = logging.getLogger(__name__)


@dataclass
class FillSummary:
    working_days: int = 0
    skipped_days: int = 0
    submitted_shifts: int = 0
    failed_shifts: int = 0


def iter_days(date_from: date, date_to: date) -> Iterator[date]:
    """Every calendar day from date_from to date_to, both included."""
    for offset in range((date_to - date_from).days + 1):
        yield date_from + timedelta(days=offset)


def is_working_day(day: date, holidays: Collection[str]) -> bool:
    return day.isoweekday() <= 5 and day.isoformat() not in holidays


def select_slots(
    day: date,
    hours_mon_thurs: List[TimeSlot],
    hours_fri: List[TimeSlot],
) -> List[TimeSlot]:
    # Saturday/Sunday never get here
    return hours_mon_thurs if day.isoweekday() <= 4 else hours_fri


def last_month_day(day: date) -> str:
    return f"{calendar.monthrange(day.year, day.month)[1]:02d}"


async def fill_hours(
    client: httpx.AsyncClient,
    *,
    cookie: str,
    employee_id: EmployeeId,
    date_from: date,
    date_to: date,
    hours_mon_thurs: List[TimeSlot],
    hours_fri: List[TimeSlot],
    holidays: Collection[str],
    year: int,
) -> FillSummary:
    """
    Walks the range one day at a time and submits the shifts of each working day.
    - weekends and holidays: skipped, no remote call
    - working day: resolve the period (every day, no cache), then one POST per complete slot
    Period and shift failures are absorbed by their own calls, so the loop always
    runs to the end. Remote calls are awaited one after another, never in parallel.
    """
    holiday_set = set(holidays)
    summary = FillSummary()

    for day in iter_days(date_from, date_to):
        formatted_date = day.isoformat()

        if not is_working_day(day, holiday_set):
            logger.info("Skipping day: %s (weekend or holiday)", formatted_date)
            summary.skipped_days += 1
            continue

        period_id = await get_period_id(
            client,
            day.month,
            last_month_day(day),
            cookie,
            employee_id,
            year,
        )
        logger.info("Processing day: %s", formatted_date)
        summary.working_days += 1

        for slot in select_slots(day, hours_mon_thurs, hours_fri):
            if not slot.is_complete:
                continue
            submitted = await post_shift(
                client,
                formatted_date,
                day.day,
                period_id,
                slot.clock_in,
                slot.clock_out,
                cookie,
            )
            if submitted:
                summary.submitted_shifts += 1
            else:
                summary.failed_shifts += 1

    return summary
