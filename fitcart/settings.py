from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "fitcart"
    REGION: str = "eu-west-2"
    ENV: str = "dev"
    DDB_TABLE_NAME: str = "fitcart-dev-table"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Profile storage ─────────────────────

    SETTINGS_BACKEND: Literal["memory", "dynamodb"] = "memory"
    SETTINGS_OWNER: str = "local"

    @property
    def uses_dynamo(self) -> bool:
        return self.SETTINGS_BACKEND == "dynamodb"


settings = Settings()
