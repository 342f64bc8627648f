import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    subscription_key: Optional[str] = None
    region: Optional[str] = None
    endpoint: str = "https://api.cognitive.microsofttranslator.com"
    api_version: str = "3.0"
    default_target_language: str = "fil"
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            subscription_key=os.getenv("AZURE_SUBSCRIPTION_KEY"),
            region=os.getenv("AZURE_REGION"),
            endpoint=os.getenv(
                "AZURE_ENDPOINT",
                "https://api.cognitive.microsofttranslator.com"
            ).rstrip("/"),
            api_version=os.getenv("AZURE_API_VERSION", "3.0"),
            default_target_language=os.getenv(
                "DEFAULT_TARGET_LANGUAGE", "fil"
            ),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
        )


@lru_cache
def get_settings() -> Settings:
    # 进程启动后只读
    return Settings.from_env()
