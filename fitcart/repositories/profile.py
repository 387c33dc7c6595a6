from typing import Protocol

from fitcart.models.profile import Gender, ProfileSettings, ProfileSettingsUpdate
from fitcart.repositories.base import DynamoRepository
from fitcart.repositories.errors import RepoError, SettingsRepoError
from fitcart.utils import db
from fitcart.utils.log import logger

HEIGHT_KEY = "fitcart_height_cm"
WEIGHT_KEY = "fitcart_weight_kg"
GENDER_KEY = "fitcart_gender"

DEFAULTS: dict[str, str] = {
    HEIGHT_KEY: "",
    WEIGHT_KEY: "",
    GENDER_KEY: Gender.MALE.value,
}


class SettingsStore(Protocol):
    def get(self, key: str) -> str: ...
    def set(self, key: str, value: str) -> None: ...


class InMemorySettingsStore:
    """
    Process-local key-value store. Unknown keys read as their default.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str:
        return self._values.get(key, DEFAULTS.get(key, ""))

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class DynamoSettingsStore(DynamoRepository):
    """
    Key-value settings kept as attributes of a single item per owner.
    """

    def __init__(self, owner: str, table=None):
        super().__init__(table)
        self._key = {"PK": db.build_owner_pk(owner), "SK": db.build_settings_sk()}

    def get(self, key: str) -> str:
        try:
            item = self._safe_get(Key=self._key, ConsistentRead=True)
        except RepoError as e:
            logger.error(f"Repo error reading setting {key}: {e}")
            raise SettingsRepoError("Failed to read setting from database") from e

        if not item or key not in item:
            return DEFAULTS.get(key, "")
        return str(item[key])

    def set(self, key: str, value: str) -> None:
        try:
            self._safe_update(
                Key=self._key,
                UpdateExpression="SET #k = :v",
                ExpressionAttributeNames={"#k": key},
                ExpressionAttributeValues={":v": value},
            )
        except RepoError as e:
            logger.error(f"Repo error writing setting {key}: {e}")
            raise SettingsRepoError("Failed to write setting to database") from e


class ProfileSettingsRepository:
    """
    Typed view over the three persisted profile fields.
    """

    def __init__(self, store: SettingsStore):
        self._store = store

    def load(self) -> ProfileSettings:
        return ProfileSettings(
            height_cm=self._store.get(HEIGHT_KEY),
            weight_kg=self._store.get(WEIGHT_KEY),
            gender=self._store.get(GENDER_KEY),
        )

    def update(self, data: ProfileSettingsUpdate) -> ProfileSettings:
        if data.height_cm is not None:
            self._store.set(HEIGHT_KEY, data.height_cm)
        if data.weight_kg is not None:
            self._store.set(WEIGHT_KEY, data.weight_kg)
        if data.gender is not None:
            self._store.set(GENDER_KEY, data.gender.value)

        logger.debug(f"Profile settings updated: {data.model_dump(exclude_none=True)}")
        return self.load()
