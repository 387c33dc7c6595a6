from fastapi import APIRouter, Depends, HTTPException

from fitcart.models.profile import NutritionRequest, NutritionSummary, Profile
from fitcart.repositories.errors import SettingsRepoError
from fitcart.repositories.profile import ProfileSettingsRepository
from fitcart.routes.profile import get_profile_repo
from fitcart.utils import dates, nutrition
from fitcart.utils.log import logger

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


def _build_profile(
    data: NutritionRequest, repo: ProfileSettingsRepository
) -> Profile:
    try:
        stored = repo.load()
    except SettingsRepoError as e:
        logger.exception(f"Error loading profile settings: {e}")
        raise HTTPException(status_code=500, detail="Internal error reading profile")

    birthdate = data.birthdate or nutrition.default_birthdate(dates.local_now())
    return Profile.from_settings(
        stored, birthdate=birthdate, activity_factor=data.activity_factor
    )


@router.post("/", response_model=NutritionSummary)
def calculate(
    data: NutritionRequest,
    repo: ProfileSettingsRepository = Depends(get_profile_repo),
):
    """Live BMR/TDEE for the stored profile."""
    profile = _build_profile(data, repo)
    return nutrition.summarize(profile, dates.local_now())


@router.post("/recompute", response_model=NutritionSummary)
def recompute(
    data: NutritionRequest,
    repo: ProfileSettingsRepository = Depends(get_profile_repo),
):
    """Explicit recalculation; carries an alert when the inputs don't validate."""
    profile = _build_profile(data, repo)
    summary = nutrition.summarize(profile, dates.local_now(), recompute=True)
    if summary.alert:
        logger.info("Nutrition recompute failed validation")
    return summary
