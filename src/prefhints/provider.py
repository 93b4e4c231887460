"""
Preference hint provider.

Wires the schema registry, activation gate, candidate resolver, matcher and
insertion engine together behind the three calls a host needs:
``is_completion_available``, ``get_completions`` and ``apply_completion``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prefhints.completion.applier import InsertionEngine
from prefhints.completion.gate import ActivationGate
from prefhints.completion.key_completion import KeyCompletionStrategy
from prefhints.completion.matcher import StringMatcher
from prefhints.completion.orchestrator import CandidateResolver
from prefhints.completion.query import compute_query
from prefhints.completion.value_completion import ValueCompletionStrategy
from prefhints.config import HintsConfig
from prefhints.domain.protocols import (
    ContextAnalyzer,
    Editor,
    LanguageRegistry,
    LintProviderRegistry,
    PreferenceStore,
    ThemeRegistry,
)
from prefhints.domain.types import ApplyResult, Candidate, CompletionResult, MatchRecord
from prefhints.events.bus import EventBus
from prefhints.events.types import ActiveDocumentChanged, LanguageAdded, PreferenceDefined, SettingChanged
from prefhints.logger import get_logger
from prefhints.schema.registry import SchemaRegistry

logger = get_logger("provider")


class PreferencesHintProvider:
    """Offers key and value hints inside preference documents."""

    def __init__(
        self,
        store: PreferenceStore,
        analyzer: ContextAnalyzer,
        language_registry: LanguageRegistry,
        lint_registry: LintProviderRegistry,
        theme_registry: ThemeRegistry,
        event_bus: EventBus | None = None,
        config: HintsConfig | None = None,
        matcher: StringMatcher | None = None,
    ) -> None:
        self._config = config or HintsConfig()
        self._store = store
        self._analyzer = analyzer
        self._language_registry = language_registry
        self._editor: Editor | None = None

        self._ensure_hint_preference()
        self._registry = SchemaRegistry.build(store.get_all_preferences(), self._config)
        self._languages: Mapping[str, Any] = dict(language_registry.get_languages())

        self.gate = ActivationGate(store, self._config)
        self._resolver = CandidateResolver(
            [
                KeyCompletionStrategy(lambda: self._registry, lambda: self._languages, self._config),
                ValueCompletionStrategy(
                    lambda: self._registry,
                    lambda: self._languages,
                    lint_registry,
                    theme_registry,
                    self._config,
                ),
            ]
        )
        self._matcher = matcher or StringMatcher(prefer_prefix_matches=True)
        self._applier = InsertionEngine(self._config, analyzer.is_disallowed_key_value_text)

        if event_bus is not None:
            self.subscribe(event_bus)

        logger.info(f"PreferencesHintProvider ready with {len(self._registry)} schema entries")

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    @property
    def languages(self) -> Mapping[str, Any]:
        return self._languages

    def subscribe(self, event_bus: EventBus) -> None:
        """Listen for preference, definition, document and language notifications."""
        event_bus.subscribe(SettingChanged, self.gate.on_setting_changed)
        event_bus.subscribe(ActiveDocumentChanged, self.gate.on_active_document_changed)
        event_bus.subscribe(LanguageAdded, self.on_language_added)
        event_bus.subscribe(PreferenceDefined, self.on_preference_defined)

    def rebuild_schema(self) -> None:
        """Rebuild the schema registry after the preference definitions changed."""
        self._registry = SchemaRegistry.build(self._store.get_all_preferences(), self._config)
        logger.debug(f"Schema registry rebuilt ({len(self._registry)} entries)")

    def on_preference_defined(self, event: PreferenceDefined) -> None:
        self.rebuild_schema()

    def refresh_languages(self) -> None:
        self._languages = dict(self._language_registry.get_languages())
        logger.debug(f"Language snapshot refreshed ({len(self._languages)} languages)")

    def on_language_added(self, event: LanguageAdded) -> None:
        self.refresh_languages()

    def is_completion_available(self, editor: Editor) -> bool:
        """Return ``True`` when hints can be offered at the editor's cursor."""
        self._editor = editor
        available = self.gate.check(editor, self._analyzer)
        logger.debug(f"Completion available: {available}")
        return available

    def get_completions(self, implicit_char: str | None = None) -> CompletionResult | None:
        """
        Return ranked suggestions for the context cached by the last availability check.

        Args:
            implicit_char: Character that triggered the request, if any (unused,
                hints are recomputed from the context)

        Returns:
            CompletionResult, or ``None`` when no context is available
        """
        context = self.gate.context
        if context is None or context.token_type is None:
            return None

        query = compute_query(context, self._analyzer.is_disallowed_key_value_text)
        candidates = self._resolver.resolve(context)
        records = self._matcher.rank(candidates, query)

        show_metadata = any(record.candidate.value_type or record.candidate.description for record in records)
        logger.debug(f"get_completions query={query!r} candidates={len(candidates)} matches={len(records)}")
        return CompletionResult(
            candidates=records,
            query=query,
            select_first_by_default=True,
            handle_wide_results=False,
            show_metadata=show_metadata,
        )

    def apply_completion(self, selected: MatchRecord | Candidate) -> ApplyResult:
        """
        Insert ``selected`` at the cursor of the editor from the last availability check.

        Returns:
            ApplyResult telling the host whether to start a new hint session
        """
        editor = self._editor
        if editor is None:
            logger.warning("apply_completion called before is_completion_available")
            return ApplyResult(continue_session=False)

        candidate = selected.candidate if isinstance(selected, MatchRecord) else selected
        cursor = editor.current_cursor()
        try:
            context = self._analyzer.resolve_context(editor, cursor, False)
        except Exception:
            logger.exception("Context analysis failed while inserting a hint")
            return ApplyResult(continue_session=False)

        if context is None:
            return ApplyResult(continue_session=False)

        plan = self._applier.plan(candidate, context, cursor)
        if plan is None:
            return ApplyResult(continue_session=False)

        self._applier.apply(plan, editor)
        return ApplyResult(continue_session=plan.continue_session)

    def _ensure_hint_preference(self) -> None:
        name = self._config.hint_setting
        if self._store.get(name) is None:
            self._store.define_preference(name, "boolean", True, self._config.hint_setting_description)
