from datetime import date, datetime, timezone


def now() -> datetime:
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    """
    Wall-clock time in the host's local zone, for calendar arithmetic
    such as ages and birthdays.
    """
    return datetime.now().astimezone()


def as_date(value: date | datetime) -> date:
    """
    Normalise a date or datetime to a plain date.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def years_between(start: date | datetime, end: date | datetime) -> int:
    """
    Whole calendar years elapsed from start to end.

    Negative when end is before start; callers decide how to floor it.
    """
    s = as_date(start)
    e = as_date(end)
    years = e.year - s.year
    if (e.month, e.day) < (s.month, s.day):
        years -= 1
    return years


def years_before(d: date, years: int) -> date:
    """
    The same calendar day `years` earlier. 29 Feb falls back to 28 Feb.
    """
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28)
