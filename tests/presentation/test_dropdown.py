from textual_autocomplete import DropdownItem, TargetState

from prefhints.completion.matcher import StringMatcher
from prefhints.domain.types import Candidate, CompletionResult, Context, Token, TokenType, ValueType
from prefhints.infrastructure.memory import InMemoryEditor
from prefhints.presentation.dropdown import PreferenceHintSource, highlight, to_dropdown_items


def make_state(text: str, cursor: int | None = None) -> TargetState:
    if cursor is None:
        cursor = len(text)
    return TargetState(text=text, cursor_position=cursor)


def test_highlight_keeps_full_text() -> None:
    record = StringMatcher().match(Candidate("closeBrackets", ValueType.BOOLEAN, "Auto close brackets"), "br")

    assert str(highlight(record)) == "closeBrackets"
    assert str(highlight(record, description=True)) == "closeBrackets  Auto close brackets"


def test_dropdown_items_show_type_prefix_with_metadata() -> None:
    records = StringMatcher().rank([Candidate("path", ValueType.OBJECT), Candidate("x")], "")
    result = CompletionResult(candidates=records, query="", show_metadata=True)

    items = to_dropdown_items(result)

    assert all(isinstance(item, DropdownItem) for item in items)
    assert [str(item.main) for item in items] == ["path", "x"]
    assert str(items[0].prefix) == "object"


def test_dropdown_items_without_metadata_have_no_prefix() -> None:
    records = StringMatcher().rank([Candidate("false"), Candidate("true")], "t")
    result = CompletionResult(candidates=records, query="t", show_metadata=False)

    items = to_dropdown_items(result)

    assert [str(item.main) for item in items] == ["true"]
    assert not items[0].prefix


def test_hint_source_round_trip(provider, analyzer, editor) -> None:
    source = PreferenceHintSource(provider, editor)
    analyzer.context = Context(
        token_type=TokenType.KEY,
        token=Token(text='"spa', start_offset=2, end_offset=6),
        cursor_offset_in_token=4,
    )

    items = source(make_state('{ "spa'))
    assert str(items[0].main).startswith("spaceUnits")

    state, continue_session = source.apply(str(items[0].main), make_state('{ "spa'))

    assert state.text == '{ "spaceUnits": '
    assert state.cursor_position == len(state.text)
    assert continue_session is True


def test_hint_source_is_empty_outside_preference_files(provider, analyzer) -> None:
    analyzer.context = Context(token_type=TokenType.KEY, token=Token(text='"', start_offset=0, end_offset=1))
    source = PreferenceHintSource(provider, InMemoryEditor(mode="text/plain"))

    assert source(make_state('"')) == []


def test_unknown_selection_leaves_state_untouched(provider, editor) -> None:
    source = PreferenceHintSource(provider, editor)
    state = make_state("{}")

    assert source.apply("nothing", state) == (state, False)


def test_hint_source_applies_names_containing_double_spaces(provider, store, analyzer, editor) -> None:
    store.define_preference("a  b", "string", "", "Spaced name")
    source = PreferenceHintSource(provider, editor)
    analyzer.context = Context(
        token_type=TokenType.KEY,
        token=Token(text='"a', start_offset=2, end_offset=4),
        cursor_offset_in_token=2,
    )

    items = source(make_state('{ "a'))
    label = next(str(item.main) for item in items if str(item.main).startswith("a  b"))
    state, continue_session = source.apply(label, make_state('{ "a'))

    assert label == "a  b  Spaced name"
    assert state.text == '{ "a  b": ""'
    assert continue_session is True
