from fastapi import APIRouter, Depends, HTTPException

from fitcart.models.profile import ProfileSettings, ProfileSettingsUpdate
from fitcart.repositories.errors import SettingsRepoError
from fitcart.repositories.profile import (
    DynamoSettingsStore,
    InMemorySettingsStore,
    ProfileSettingsRepository,
    SettingsStore,
)
from fitcart.settings import settings
from fitcart.utils.log import logger

router = APIRouter(prefix="/profile", tags=["profile"])

_memory_store = InMemorySettingsStore()


def get_settings_store() -> SettingsStore:
    if settings.uses_dynamo:
        return DynamoSettingsStore(settings.SETTINGS_OWNER)
    return _memory_store


def get_profile_repo(
    store: SettingsStore = Depends(get_settings_store),
) -> ProfileSettingsRepository:
    return ProfileSettingsRepository(store)


@router.get("/", response_model=ProfileSettings)
def get_profile(repo: ProfileSettingsRepository = Depends(get_profile_repo)):
    try:
        return repo.load()
    except SettingsRepoError as e:
        logger.exception(f"Error loading profile settings: {e}")
        raise HTTPException(status_code=500, detail="Internal error reading profile")


@router.put("/", response_model=ProfileSettings)
def update_profile(
    data: ProfileSettingsUpdate,
    repo: ProfileSettingsRepository = Depends(get_profile_repo),
):
    try:
        return repo.update(data)
    except SettingsRepoError as e:
        logger.exception(f"Error saving profile settings: {e}")
        raise HTTPException(status_code=500, detail="Internal error saving profile")
