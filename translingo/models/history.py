import random
import time
from datetime import datetime, timezone
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from translingo.models.translation import TranslationResult


def new_entry_id() -> str:
    # 毫秒时间戳 + 随机数，避免同一毫秒内重复
    return f"{int(time.time() * 1000)}.{random.randint(0, 999999):06d}"


class HistoryEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_entry_id)
    source_text: str = Field(alias="sourceText")
    from_language: str = Field(alias="fromLanguage")
    # 旧版记录里 translations 是单个 {language, text} 对象
    translations: Union[List[TranslationResult], TranslationResult]
    timestamp: str
    date: str
    time: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return str(value)

    @classmethod
    def create(cls, source_text: str, from_language: str,
               translations: List[TranslationResult]) -> "HistoryEntry":
        now = datetime.now().astimezone()
        return cls(
            source_text=source_text,
            from_language=from_language,
            translations=translations,
            timestamp=now.astimezone(timezone.utc).isoformat(),
            date=f"{now.month}/{now.day}/{now.year}",
            time=now.strftime("%H:%M"),
        )

    @property
    def is_legacy(self) -> bool:
        return isinstance(self.translations, TranslationResult)

    def results(self) -> List[TranslationResult]:
        if self.is_legacy:
            return [self.translations]
        return list(self.translations)

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True)
