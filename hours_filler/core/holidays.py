from typing import List

# (month, day) of the fixed national holidays
NATIONAL_HOLIDAYS = [
    (1, 1), (1, 6), (3, 20), (4, 17), (4, 18),
    (5, 1), (5, 2), (5, 15), (8, 15), (10, 12),
    (11, 1), (11, 9), (12, 6), (12, 8), (12, 25),
]


def build_static_holidays(year: int) -> List[str]:
    """
    National holidays of `year` as YYYY-MM-DD strings.
    Built once at startup and served as-is by GET /holidays.
    """
    return [f"{year}-{month:02d}-{day:02d}" for month, day in NATIONAL_HOLIDAYS]
