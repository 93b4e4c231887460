"""
Adapters between the hint provider and ``textual_autocomplete``.

``PreferenceHintSource`` can be passed as the ``candidates`` callable of an
``AutoComplete`` widget, and its ``apply`` method used from the widget's
``apply_completion`` override.
"""

from __future__ import annotations

from textual.content import Content
from textual_autocomplete import DropdownItem, TargetState

from prefhints.domain.types import CompletionResult, MatchRecord
from prefhints.infrastructure.memory import InMemoryEditor
from prefhints.logger import get_logger
from prefhints.provider import PreferencesHintProvider

logger = get_logger("presentation.dropdown")

MATCHED_STYLE = "bold"
DESCRIPTION_STYLE = "dim"


def highlight(record: MatchRecord, description: bool = False) -> Content:
    """Render a record's text with the matched spans styled."""
    parts: list[str | tuple[str, str]] = [
        (span.text, MATCHED_STYLE) if span.matched else span.text for span in record.ranges
    ]
    if description and record.candidate.description:
        parts.append((f"  {record.candidate.description}", DESCRIPTION_STYLE))
    return Content.assemble(*parts)


def to_dropdown_items(result: CompletionResult) -> list[DropdownItem]:
    items: list[DropdownItem] = []
    for record in result.candidates:
        prefix = None
        if result.show_metadata and record.candidate.value_type is not None:
            prefix = record.candidate.value_type.value
        items.append(DropdownItem(main=highlight(record, result.show_metadata), prefix=prefix))
    return items


class PreferenceHintSource:
    """Candidate callable for an autocomplete widget bound to one editor."""

    def __init__(self, provider: PreferencesHintProvider, editor: InMemoryEditor) -> None:
        self._provider = provider
        self._editor = editor
        self._last: dict[str, MatchRecord] = {}

    def __call__(self, state: TargetState) -> list[DropdownItem]:
        self._editor.sync(state)
        self._last = {}
        if not self._provider.is_completion_available(self._editor):
            return []

        result = self._provider.get_completions()
        if result is None:
            return []

        # Keyed by the label the widget shows, description included.
        self._last = {highlight(record, result.show_metadata).plain: record for record in result.candidates}
        return to_dropdown_items(result)

    def apply(self, value: str, state: TargetState) -> tuple[TargetState, bool]:
        """
        Insert the dropdown value chosen by the user.

        Args:
            value: Plain text of the chosen dropdown item, as rendered
            state: Current target state

        Returns:
            The new target state and whether a new hint session should start
        """
        self._editor.sync(state)
        record = self._last.get(value)
        if record is None:
            logger.warning(f"Selected value {value!r} is not among the last suggestions")
            return state, False

        outcome = self._provider.apply_completion(record)
        return self._editor.target_state, outcome.continue_session
