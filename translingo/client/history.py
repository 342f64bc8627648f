import json
import logging
from typing import Callable, Iterator, List, Optional

from pydantic import ValidationError

from translingo.client.storage import LocalStorage
from translingo.models.history import HistoryEntry
from translingo.models.translation import TranslationResult

logger = logging.getLogger(__name__)

HISTORY_KEY = "translationHistory"
MAX_HISTORY = 50


class TranslationHistory:
    """Newest-first list of past translations, persisted as one JSON blob."""

    def __init__(self, storage: LocalStorage, limit: int = MAX_HISTORY):
        self.storage = storage
        self.limit = limit
        self.entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries)

    def load(self):
        stored = self.storage.get_item(HISTORY_KEY)
        self.entries = []
        if not stored:
            return
        for item in json.loads(stored):
            try:
                self.entries.append(HistoryEntry.model_validate(item))
            except ValidationError as e:
                # 跳过无法读取的记录，其余照常加载
                logger.warning(f"Skipping unreadable history entry: {e}")
        logger.debug(f"Loaded {len(self.entries)} history entries")

    def save(self):
        self.storage.set_item(
            HISTORY_KEY, json.dumps([e.to_storage() for e in self.entries])
        )

    def add(self, source_text: str, from_language: str,
            translations: List[TranslationResult]) -> HistoryEntry:
        entry = HistoryEntry.create(source_text, from_language, translations)
        self.entries.insert(0, entry)
        # 超出上限时丢弃最旧的记录
        del self.entries[self.limit:]
        self.save()
        return entry

    def get(self, entry_id) -> Optional[HistoryEntry]:
        entry_id = str(entry_id)
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def delete(self, entry_id) -> bool:
        entry_id = str(entry_id)
        remaining = [e for e in self.entries if e.id != entry_id]
        if len(remaining) == len(self.entries):
            return False
        self.entries = remaining
        self.save()
        return True

    def clear(self, confirm: Callable[[], bool]) -> bool:
        if not confirm():
            return False
        self.entries = []
        self.save()
        return True
