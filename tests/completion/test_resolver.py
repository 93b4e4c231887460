from prefhints.completion.orchestrator import CandidateResolver
from prefhints.completion.strategy import CompletionRequest, CompletionStrategy
from prefhints.domain.types import Candidate, Context, Token, TokenType


class StubStrategy(CompletionStrategy):
    def __init__(self, name: str, match: bool, result: list[str]):
        self.name = name
        self._match = match
        self._result = result
        self.calls = 0

    def can_handle(self, request: CompletionRequest) -> bool:
        self.calls += 1
        return self._match

    def get_candidates(self, request: CompletionRequest) -> list[Candidate]:
        return [Candidate(raw_text=value) for value in self._result]


class ExplodingStrategy(CompletionStrategy):
    def can_handle(self, request: CompletionRequest) -> bool:
        return True

    def get_candidates(self, request: CompletionRequest) -> list[Candidate]:
        raise RuntimeError("provider returned garbage")


def make_context() -> Context:
    return Context(token_type=TokenType.KEY, token=Token(text="", start_offset=0, end_offset=0))


def test_resolver_selects_first_matching_strategy() -> None:
    strategies = [
        StubStrategy("A", match=False, result=[]),
        StubStrategy("B", match=True, result=["hit"]),
        StubStrategy("C", match=True, result=["miss"]),
    ]
    resolver = CandidateResolver(strategies)

    candidates = resolver.resolve(make_context())

    assert [candidate.raw_text for candidate in candidates] == ["hit"]
    assert strategies[0].calls == 1
    assert strategies[1].calls == 1
    assert strategies[2].calls == 0


def test_resolver_returns_nothing_when_no_strategy_matches() -> None:
    resolver = CandidateResolver([StubStrategy("A", match=False, result=["x"])])

    assert resolver.resolve(make_context()) == []


def test_failing_strategy_degrades_to_no_candidates() -> None:
    fallback = StubStrategy("B", match=True, result=["never"])
    resolver = CandidateResolver([ExplodingStrategy(), fallback])

    assert resolver.resolve(make_context()) == []
    assert fallback.calls == 0
