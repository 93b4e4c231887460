"""
Completion components for preference hints.

Candidate resolution is split into strategies (keys, values) coordinated
by ``CandidateResolver``; ``StringMatcher`` ranks the candidates and
``InsertionEngine`` turns the accepted one into a text edit.
"""

from .strategy import CompletionRequest, CompletionStrategy
from .orchestrator import CandidateResolver
from .key_completion import KeyCompletionStrategy
from .value_completion import ValueCompletionStrategy
from .matcher import StringMatcher
from .applier import InsertionEngine
from .gate import ActivationGate
from .query import compute_query

__all__ = [
    "CompletionRequest",
    "CompletionStrategy",
    "CandidateResolver",
    "KeyCompletionStrategy",
    "ValueCompletionStrategy",
    "StringMatcher",
    "InsertionEngine",
    "ActivationGate",
    "compute_query",
]
