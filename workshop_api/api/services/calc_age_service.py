# This file implements whole-year age calculation from an ISO-8601 birth date.
# Parsing is strict `YYYY-MM-DD`; the reference date comes from an injected clock.
# Failures are raised as InvalidFormatError or InvalidValueError for the router to translate.

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class AgeCalculationError(ValueError):
    """Base error for birth date input rejected by the age calculation."""

    error_code = "INVALID_BIRTH_DATE"


class InvalidFormatError(AgeCalculationError):
    """The birth date string is not a valid ISO-8601 calendar date."""

    error_code = "INVALID_FORMAT"


class InvalidValueError(AgeCalculationError):
    """The birth date parsed but is missing or in the future."""

    error_code = "INVALID_VALUE"


def local_today() -> date:
    return date.today()


def build_clock(timezone: str | None) -> Callable[[], date]:
    """Return a callable giving today's date, in `timezone` when one is set."""

    if timezone is None:
        return local_today
    zone = ZoneInfo(timezone)

    def _today() -> date:
        return datetime.now(tz=zone).date()

    return _today


def whole_years_between(start: date, end: date) -> int:
    """Count complete year cycles from `start` to `end` by calendar comparison."""

    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class CalcAgeService:
    """Age calculation for the calc-age endpoint."""

    def __init__(self, *, clock: Callable[[], date] = local_today) -> None:
        self.clock = clock

    def parse_birth_date(self, raw: str) -> date:
        if not _ISO_DATE_RE.fullmatch(raw):
            raise InvalidFormatError(f"Birth date must be formatted as YYYY-MM-DD, got {raw!r}.")
        try:
            return date.fromisoformat(raw)
        except ValueError as exc:
            raise InvalidFormatError(f"Birth date is not a valid calendar date: {raw!r}.") from exc

    def calculate_age(self, birth_date: date | None) -> int:
        if birth_date is None:
            raise InvalidValueError("Birth date is required.")

        today = self.clock()
        if birth_date > today:
            raise InvalidValueError(f"Birth date {birth_date.isoformat()} is in the future.")
        return whole_years_between(birth_date, today)

    def calculate_age_from_text(self, raw: str | None) -> int:
        try:
            if raw is None:
                raise InvalidValueError("Birth date is required.")
            return self.calculate_age(self.parse_birth_date(raw))
        except AgeCalculationError as exc:
            logger.info("Rejected birth date input (%s): %s", exc.error_code, exc)
            raise
