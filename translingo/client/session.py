import json
import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from translingo.client.clipboard import Clipboard
from translingo.client.gateway import GatewayClient
from translingo.client.history import TranslationHistory
from translingo.client.languages import (
    DEFAULT_SOURCE_LANGUAGE,
    LANGUAGE_NAMES,
    language_name,
)
from translingo.client.storage import LocalStorage
from translingo.core.errors import (
    NetworkError,
    ServerReportedError,
    UnexpectedResponse,
)
from translingo.models.translation import (
    CHAR_LIMIT,
    TranslationResult,
    results_of,
)

logger = logging.getLogger(__name__)

THEME_KEY = "darkMode"


class SessionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    REQUESTING = "requesting"
    LOADING = "loading"
    RENDERED = "rendered"
    ERROR_SHOWN = "error_shown"


class Panel(str, Enum):
    NONE = "none"
    SOURCE = "source"
    TARGETS = "targets"
    HISTORY = "history"


class ClientSession:
    """All state of one translator page, owned by a single controller.

    ``open()`` restores the theme and history from storage and ``close()``
    writes them back; the session also works as an async context manager.
    Every change to history is persisted immediately.
    """

    def __init__(self, gateway: GatewayClient, storage: LocalStorage,
                 clipboard: Optional[Clipboard] = None):
        self.gateway = gateway
        self.storage = storage
        self.clipboard = clipboard or Clipboard()
        self.history = TranslationHistory(storage)

        self.state = SessionState.IDLE
        self.message: Optional[str] = None
        self.text = ""
        self.limit_reached = False
        self.source_language = DEFAULT_SOURCE_LANGUAGE
        self.targets: List[str] = []
        self.results: List[TranslationResult] = []
        self.dark_mode = False
        self.open_panel = Panel.NONE
        self.copied = False

    # ---- lifecycle ----

    def open(self):
        saved_theme = self.storage.get_item(THEME_KEY)
        if saved_theme is not None:
            self.dark_mode = bool(json.loads(saved_theme))
        self.history.load()

    def close(self):
        self.storage.set_item(THEME_KEY, json.dumps(self.dark_mode))
        self.history.save()

    async def __aenter__(self) -> "ClientSession":
        self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.close()

    def _next_action(self):
        if self.state in (SessionState.REJECTED, SessionState.RENDERED,
                          SessionState.ERROR_SHOWN):
            self.state = SessionState.IDLE
        self.copied = False

    # ---- input ----

    def set_text(self, text: str):
        self._next_action()
        self.limit_reached = len(text) > CHAR_LIMIT
        self.text = text[:CHAR_LIMIT]

    def clear_input(self):
        self.set_text("")

    @property
    def char_count(self) -> str:
        return f"{len(self.text)}/{CHAR_LIMIT}"

    def select_source_language(self, code: str):
        self._next_action()
        self.source_language = code
        if self.open_panel is Panel.SOURCE:
            self.open_panel = Panel.NONE

    def toggle_target(self, code: str):
        self._next_action()
        if code in self.targets:
            self.targets.remove(code)
        else:
            self.targets.append(code)

    def set_targets(self, codes: Iterable[str]):
        self._next_action()
        self.targets = []
        for code in codes:
            if code not in self.targets:
                self.targets.append(code)

    def select_all_targets(self, checked: bool):
        self.set_targets(LANGUAGE_NAMES if checked else [])

    @property
    def target_label(self) -> str:
        if not self.targets:
            return "Spanish"
        if len(self.targets) == 1:
            return language_name(self.targets[0])
        return f"{len(self.targets)} languages selected"

    @property
    def select_all_state(self) -> str:
        selected = [code for code in LANGUAGE_NAMES if code in self.targets]
        if not selected:
            return "unchecked"
        if len(selected) == len(LANGUAGE_NAMES):
            return "checked"
        return "indeterminate"

    # ---- translation cycle ----

    def _validate(self) -> Optional[str]:
        if not self.text.strip():
            return "Please enter some text to translate."
        if not self.targets:
            return "Please select at least one target language."
        if self.source_language in self.targets:
            return "Source and target languages are the same."
        return None

    def _show_error(self, message: str):
        # 保留之前的结果和历史，只显示错误信息
        self.state = SessionState.ERROR_SHOWN
        self.message = message

    def _render(self, results: List[TranslationResult]):
        self.results = list(results)
        self.message = None
        self.state = SessionState.RENDERED

    async def translate(self) -> bool:
        self._next_action()
        self.state = SessionState.VALIDATING
        reason = self._validate()
        if reason:
            self.state = SessionState.REJECTED
            self.message = reason
            return False

        text = self.text
        source = self.source_language
        targets = list(self.targets)

        self.state = SessionState.REQUESTING
        if len(targets) > 1:
            self.message = "Translating to multiple languages..."
        else:
            self.message = "Translating..."
        self.state = SessionState.LOADING

        try:
            response = await self.gateway.translate(text, source, targets)
        except NetworkError as e:
            self._show_error(f"Error: {e.message}")
            return False
        except ServerReportedError as e:
            self._show_error(f"Error: {e.message}")
            return False
        except UnexpectedResponse as e:
            self._show_error(e.message)
            return False

        results = results_of(response)
        self._render(results)
        self.history.add(text, source, results)
        return True

    # ---- history ----

    def replay(self, entry_id) -> bool:
        """Show a stored entry again without contacting the gateway."""
        self._next_action()
        entry = self.history.get(entry_id)
        if entry is None:
            return False

        self.text = entry.source_text
        self.limit_reached = False
        self.source_language = entry.from_language
        self._render(entry.results())
        if self.open_panel is Panel.HISTORY:
            self.open_panel = Panel.NONE
        return True

    def delete_history_entry(self, entry_id) -> bool:
        return self.history.delete(entry_id)

    def clear_history(self, confirm: Callable[[], bool]) -> bool:
        return self.history.clear(confirm)

    def history_items(self) -> List[dict]:
        items = []
        for entry in self.history:
            items.append({
                "id": entry.id,
                "when": f"{entry.date} {entry.time}",
                "source": (
                    f'From {language_name(entry.from_language)}: '
                    f'"{entry.source_text}"'
                ),
                "translations": [
                    (language_name(r.language), r.text)
                    for r in entry.results()
                ],
            })
        return items

    # ---- output ----

    @property
    def rendered(self) -> List[tuple]:
        return [(language_name(r.language), r.text) for r in self.results]

    def export_text(self) -> str:
        return "\n".join(f"{label}: {text}" for label, text in self.rendered)

    def copy_results(self) -> bool:
        text = self.export_text()
        if not text:
            return False
        self.copied = self.clipboard.copy(text)
        return self.copied

    # ---- theme & panels ----

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        self.storage.set_item(THEME_KEY, json.dumps(self.dark_mode))
        return self.dark_mode

    def toggle_panel(self, panel: Panel):
        # 同一时间只打开一个浮层
        if self.open_panel is panel:
            self.open_panel = Panel.NONE
        else:
            self.open_panel = panel

    def click_outside(self):
        self.open_panel = Panel.NONE
