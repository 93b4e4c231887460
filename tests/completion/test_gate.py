import threading

import pytest

from prefhints.completion.gate import ActivationGate
from prefhints.domain.types import Context, Token, TokenType
from prefhints.events.types import ActiveDocumentChanged, SettingChanged
from prefhints.infrastructure.memory import InMemoryEditor, InMemoryPreferenceStore, StaticContextAnalyzer


class ExplodingAnalyzer(StaticContextAnalyzer):
    def resolve_context(self, editor, position, allow_nested_analysis):
        raise RuntimeError("tokenizer crashed")


def make_context(token_type: TokenType | None = TokenType.KEY, parent: str = "") -> Context:
    return Context(
        token_type=token_type,
        token=Token(text='"', start_offset=0, end_offset=1),
        parent_key_name=parent,
        cursor_offset_in_token=1,
    )


@pytest.fixture
def gate() -> ActivationGate:
    gate = ActivationGate(InMemoryPreferenceStore())
    gate.set_active_document("brackets.json")
    return gate


def test_gate_passes_when_everything_lines_up(gate) -> None:
    context = make_context()

    assert gate.check(InMemoryEditor(), StaticContextAnalyzer(context))
    assert gate.context is context


@pytest.mark.parametrize("setting", ["showCodeHints", "codehint.PrefHints"])
def test_either_setting_disables_hints(setting) -> None:
    store = InMemoryPreferenceStore()
    store.set(setting, False)
    gate = ActivationGate(store)
    gate.set_active_document("brackets.json")

    assert not gate.hints_globally_enabled
    assert not gate.check(InMemoryEditor(), StaticContextAnalyzer(make_context()))


def test_setting_change_notification_refreshes_flag() -> None:
    store = InMemoryPreferenceStore()
    gate = ActivationGate(store)
    assert gate.hints_globally_enabled

    store.set("showCodeHints", False)
    gate.on_setting_changed(SettingChanged(name="showCodeHints", value=False))

    assert not gate.hints_globally_enabled


def test_unrelated_setting_change_is_ignored() -> None:
    store = InMemoryPreferenceStore()
    gate = ActivationGate(store)
    store.set("showCodeHints", False)

    gate.on_setting_changed(SettingChanged(name="spaceUnits", value=4))

    assert gate.hints_globally_enabled


@pytest.mark.parametrize(
    "name, expected",
    [("brackets.json", True), (".brackets.json", True), ("package.json", False), ("brackets.json.bak", False)],
)
def test_document_identity(name, expected) -> None:
    gate = ActivationGate(InMemoryPreferenceStore())

    gate.on_active_document_changed(ActiveDocumentChanged(document_name=name))

    assert gate.current_document_is_target is expected


def test_closing_all_editors_keeps_document_flag(gate) -> None:
    gate.on_active_document_changed(ActiveDocumentChanged(document_name=None))

    assert gate.current_document_is_target


def test_other_content_modes_are_rejected(gate) -> None:
    editor = InMemoryEditor(mode="text/javascript")

    assert not gate.check(editor, StaticContextAnalyzer(make_context()))


def test_missing_context_or_token_type_is_rejected(gate) -> None:
    assert not gate.check(InMemoryEditor(), StaticContextAnalyzer(None))
    assert not gate.check(InMemoryEditor(), StaticContextAnalyzer(make_context(token_type=None)))
    assert gate.context is None


@pytest.mark.parametrize("parent", ["language.fileExtensions", "language.fileNames", "path"])
def test_denied_parents_suppress_key_hints(gate, parent) -> None:
    assert not gate.check(InMemoryEditor(), StaticContextAnalyzer(make_context(parent=parent)))


def test_denied_parents_still_allow_value_hints(gate) -> None:
    context = make_context(token_type=TokenType.VALUE, parent="language.fileExtensions")

    assert gate.check(InMemoryEditor(), StaticContextAnalyzer(context))


def test_analyzer_failure_means_no_hints(gate) -> None:
    assert not gate.check(InMemoryEditor(), ExplodingAnalyzer(None))


def test_notifications_from_another_thread_during_checks() -> None:
    store = InMemoryPreferenceStore()
    gate = ActivationGate(store)
    gate.set_active_document("brackets.json")
    analyzer = StaticContextAnalyzer(make_context())

    def toggle() -> None:
        for i in range(200):
            store.set("showCodeHints", i % 2 == 1)
            gate.on_setting_changed(SettingChanged(name="showCodeHints"))
            gate.set_active_document("brackets.json" if i % 2 == 1 else "package.json")

    worker = threading.Thread(target=toggle)
    outcomes = []
    worker.start()
    while worker.is_alive():
        outcomes.append(gate.check(InMemoryEditor(), analyzer))
    worker.join()

    assert all(isinstance(outcome, bool) for outcome in outcomes)
    assert gate.hints_globally_enabled
    assert gate.current_document_is_target
    assert gate.check(InMemoryEditor(), analyzer)
    assert gate.context is analyzer.context
