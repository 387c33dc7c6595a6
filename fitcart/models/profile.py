from datetime import date as DateType
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_ACTIVITY_FACTOR = 1.2
MIN_ACTIVITY_FACTOR = 1.2
MAX_ACTIVITY_FACTOR = 2.0
ACTIVITY_FACTOR_STEP = 0.1


class Gender(str, Enum):
    MALE = "男性"
    FEMALE = "女性"

    @classmethod
    def from_tag(cls, tag: str | None) -> "Gender":
        """Stored tags that don't match a member fall back to male."""
        for g in cls:
            if tag == g.value or (tag or "").lower() == g.name.lower():
                return g
        return cls.MALE


class ProfileSettings(BaseModel):
    """
    The three persisted profile fields, kept as the raw strings the user typed.
    """

    height_cm: str = ""
    weight_kg: str = ""
    gender: str = Gender.MALE.value


class ProfileSettingsUpdate(BaseModel):
    height_cm: str | None = Field(default=None, max_length=32)
    weight_kg: str | None = Field(default=None, max_length=32)
    gender: Gender | None = None


class Profile(BaseModel):
    """
    Snapshot fed to the nutrition calculator. Height and weight stay as text
    and are parsed on demand; activity factor is not range-checked here so
    that validation can report it.
    """

    gender: Gender = Gender.MALE
    birthdate: DateType
    height_cm: str = ""
    weight_kg: str = ""
    activity_factor: float = DEFAULT_ACTIVITY_FACTOR

    @classmethod
    def from_settings(
        cls,
        stored: ProfileSettings,
        *,
        birthdate: DateType,
        activity_factor: float = DEFAULT_ACTIVITY_FACTOR,
    ) -> "Profile":
        return cls(
            gender=Gender.from_tag(stored.gender),
            birthdate=birthdate,
            height_cm=stored.height_cm,
            weight_kg=stored.weight_kg,
            activity_factor=activity_factor,
        )


class NutritionRequest(BaseModel):
    birthdate: DateType | None = None
    activity_factor: float = Field(
        default=DEFAULT_ACTIVITY_FACTOR, allow_inf_nan=False
    )


class NutritionSummary(BaseModel):
    age: int
    bmr: float | None
    tdee: float | None
    is_valid: bool
    message: str | None = None
    alert: str | None = None
