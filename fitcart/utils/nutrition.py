"""Age, BMR and TDEE from a profile snapshot.

BMR uses the Mifflin-St Jeor equation (weight in kg, height in cm):
    male:   10 * weight + 6.25 * height - 5 * age + 5
    female: 10 * weight + 6.25 * height - 5 * age - 161

TDEE is BMR scaled by the activity factor (1.2 sedentary .. 2.0 very active).
Anything that cannot be computed comes back as None rather than raising.
"""

import math
from datetime import date, datetime

from fitcart.models.profile import (
    MAX_ACTIVITY_FACTOR,
    MIN_ACTIVITY_FACTOR,
    Gender,
    NutritionSummary,
    Profile,
)
from fitcart.utils import dates

DEFAULT_AGE_YEARS = 20

MALE_OFFSET = 5.0
FEMALE_OFFSET = -161.0

UNAVAILABLE_HINT = "Check that height, weight and birthdate are sensible values."
INVALID_INPUT_ALERT = (
    "Enter a valid height and weight, and set a reasonable birthdate."
)


def parse_measurement(text: str | None) -> float | None:
    """
    Parse a free-text height/weight. Non-numeric, non-finite and non-positive
    values are unavailable.
    """
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def default_birthdate(now: date | datetime | None = None) -> date:
    moment = dates.as_date(now or dates.local_now())
    return dates.years_before(moment, DEFAULT_AGE_YEARS)


def age(birthdate: date | datetime | None, now: date | datetime | None = None) -> int:
    """Whole years from birthdate to now, never below zero."""
    if birthdate is None:
        return 0
    return max(0, dates.years_between(birthdate, now or dates.local_now()))


def bmr(profile: Profile, now: date | datetime | None = None) -> float | None:
    height = parse_measurement(profile.height_cm)
    weight = parse_measurement(profile.weight_kg)
    years = age(profile.birthdate, now)
    if height is None or weight is None or years <= 0:
        return None

    base = 10.0 * weight + 6.25 * height - 5.0 * years
    offset = MALE_OFFSET if profile.gender == Gender.MALE else FEMALE_OFFSET
    return base + offset


def tdee(profile: Profile, now: date | datetime | None = None) -> float | None:
    value = bmr(profile, now)
    if value is None:
        return None
    total = value * profile.activity_factor
    if not math.isfinite(total):
        return None
    return total


def validate(profile: Profile, now: date | datetime | None = None) -> bool:
    height = parse_measurement(profile.height_cm)
    weight = parse_measurement(profile.weight_kg)
    return (
        height is not None
        and weight is not None
        and age(profile.birthdate, now) > 0
        and MIN_ACTIVITY_FACTOR <= profile.activity_factor <= MAX_ACTIVITY_FACTOR
    )


def summarize(
    profile: Profile,
    now: date | datetime | None = None,
    *,
    recompute: bool = False,
) -> NutritionSummary:
    """
    Everything the results section shows. `recompute` marks an explicit
    recalculation, which adds the alert text when validation fails.
    """
    moment = now or dates.local_now()
    value = bmr(profile, moment)
    total = tdee(profile, moment)
    is_valid = validate(profile, moment)

    return NutritionSummary(
        age=age(profile.birthdate, moment),
        bmr=value,
        tdee=total,
        is_valid=is_valid,
        message=UNAVAILABLE_HINT if value is None or total is None else None,
        alert=INVALID_INPUT_ALERT if recompute and not is_valid else None,
    )
