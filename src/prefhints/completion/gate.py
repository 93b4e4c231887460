"""
Activation gate: decides whether preference hints are offered at all.
"""

from __future__ import annotations

import re
import threading

from prefhints.config import HintsConfig
from prefhints.domain.protocols import ContextAnalyzer, Editor, PreferenceStore
from prefhints.domain.types import Context, TokenType
from prefhints.events.types import ActiveDocumentChanged, SettingChanged
from prefhints.logger import get_logger

logger = get_logger("completion.gate")


class ActivationGate:
    """
    Tracks the global enablement flags and runs the per-request checks.

    Two flags are maintained from notifications: whether hints are enabled
    by preference, and whether the active document is a preferences file.
    Both are guarded by a lock because notifications may arrive on a
    different thread than the request path.

    A successful ``check`` caches the resolved context for the candidate
    resolution call that immediately follows it.
    """

    def __init__(self, store: PreferenceStore, config: HintsConfig | None = None) -> None:
        self._store = store
        self._config = config or HintsConfig()
        self._document_pattern = re.compile(self._config.document_name_pattern)
        self._lock = threading.Lock()
        self._hints_globally_enabled = False
        self._current_document_is_target = False
        self._context: Context | None = None
        self.refresh_global_enablement()

    @property
    def hints_globally_enabled(self) -> bool:
        with self._lock:
            return self._hints_globally_enabled

    @property
    def current_document_is_target(self) -> bool:
        with self._lock:
            return self._current_document_is_target

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._hints_globally_enabled and self._current_document_is_target

    @property
    def context(self) -> Context | None:
        """Context cached by the last successful structural check."""
        return self._context

    def is_target_document(self, document_name: str | None) -> bool:
        return bool(document_name) and self._document_pattern.match(document_name) is not None

    def refresh_global_enablement(self) -> None:
        enabled = all(self._store.get(name) is not False for name in self._config.enable_settings)
        with self._lock:
            self._hints_globally_enabled = enabled
        logger.debug(f"Hints globally enabled: {enabled}")

    def set_active_document(self, document_name: str | None) -> None:
        if document_name is not None:
            is_target = self.is_target_document(document_name)
            with self._lock:
                self._current_document_is_target = is_target
            logger.debug(f"Active document {document_name!r} is target: {is_target}")
        self.refresh_global_enablement()

    def on_setting_changed(self, event: SettingChanged) -> None:
        if event.name in self._config.enable_settings:
            self.refresh_global_enablement()

    def on_active_document_changed(self, event: ActiveDocumentChanged) -> None:
        self.set_active_document(event.document_name)

    def check(self, editor: Editor, analyzer: ContextAnalyzer) -> bool:
        """Return ``True`` when hints should be offered at the editor's cursor."""
        self._context = None
        if not self.enabled:
            return False

        if editor.mode_for_selection() != self._config.content_mode:
            return False

        try:
            context = analyzer.resolve_context(editor, editor.current_cursor(), True)
        except Exception:
            logger.exception("Context analysis failed")
            return False

        if context is None or context.token_type is None:
            return False

        self._context = context

        if context.token_type is TokenType.KEY and context.parent_key_name in self._config.key_deny_parents:
            logger.debug(f"Key hints suppressed under {context.parent_key_name!r}")
            return False

        return True
