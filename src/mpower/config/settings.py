import os
from typing import Literal, Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

load_dotenv()


class Settings(BaseSettings):
    # MPower credentials
    mpower_master_key: Optional[str] = os.getenv("MPOWER_MASTER_KEY")
    mpower_private_key: Optional[str] = os.getenv("MPOWER_PRIVATE_KEY")
    mpower_public_key: Optional[str] = os.getenv("MPOWER_PUBLIC_KEY")
    mpower_token: Optional[str] = os.getenv("MPOWER_TOKEN")
    mpower_mode: Literal["test", "live"] = os.getenv("MPOWER_MODE", default="test")

    # Service
    log_dir: str = Field(
        default=os.getenv("MPOWER_LOG_DIR", default="logs"),
        validation_alias="MPOWER_LOG_DIR",
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
