"""Candidate sources: one enumeration strategy per collection kind.

A completion table arrives in one of several shapes. Each shape is wrapped
in a ``CandidateSource`` subclass that yields the comparable string form of
every entry accepted by the caller's predicate. The predicate is called
with the same arguments a completion framework would pass for that shape:

    sequence            pred(entry)
    associative list    pred((key, value))
    frequency table     pred(key, value)
    name table          pred(symbol)
    generator           handed to the generator, which applies it itself

Iteration order follows the underlying collection. Frequency and name
tables are unordered, so callers must not rely on the order in which
their entries are produced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from typomatch.modules.matching.errors import UnsupportedSourceError

__all__ = [
    "AssociativeListSource",
    "CandidateSource",
    "CompletionGenerator",
    "ExternalPredicate",
    "FrequencyTableSource",
    "GeneratorSource",
    "NameTableSource",
    "SequenceSource",
    "Symbol",
    "as_source",
    "as_text",
]

ExternalPredicate = Callable[..., Any]


@dataclass(frozen=True)
class Symbol:
    """A named atom. Matched by its name."""

    name: str

    def __str__(self) -> str:
        return self.name


class CompletionGenerator(Protocol):
    """Anything that can list completion entries on demand."""

    def __call__(
        self,
        filter_text: str,
        predicate: ExternalPredicate | None,
        all_entries: bool,
    ) -> Sequence[Any] | None: ...


def as_text(entry: object) -> str:
    """Comparable string form of a table entry.

    Raises:
        UnsupportedSourceError: If the entry is neither a string nor a symbol.
    """
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Symbol):
        return entry.name
    raise UnsupportedSourceError(
        f"Cannot match against {type(entry).__name__} entry {entry!r}"
    )


class CandidateSource(ABC):
    """A collection of completion candidates."""

    @abstractmethod
    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        """Yield the string form of each entry the predicate accepts."""


class SequenceSource(CandidateSource):
    """Ordered strings or symbols."""

    def __init__(self, entries: Iterable[str | Symbol]) -> None:
        self.entries = list(entries)

    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        for entry in self.entries:
            if predicate is None or predicate(entry):
                yield as_text(entry)


class AssociativeListSource(CandidateSource):
    """Ordered (key, value) pairs. Only keys are matched."""

    def __init__(self, pairs: Iterable[tuple[str | Symbol, Any]]) -> None:
        self.pairs = [tuple(pair) for pair in pairs]

    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        for pair in self.pairs:
            if predicate is None or predicate(pair):
                yield as_text(pair[0])


class FrequencyTableSource(CandidateSource):
    """Mapping from key to a frequency or other value. Values are ignored."""

    def __init__(self, table: Mapping[str | Symbol, Any]) -> None:
        self.table = table

    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        for key, value in self.table.items():
            if predicate is None or predicate(key, value):
                yield as_text(key)


class NameTableSource(CandidateSource):
    """Unordered collection of symbols, matched by name."""

    def __init__(self, symbols: Iterable[Symbol]) -> None:
        self.symbols = symbols

    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        for symbol in self.symbols:
            if predicate is None or predicate(symbol):
                yield as_text(symbol)


class GeneratorSource(CandidateSource):
    """Lazily computed table, materialized in full on each query."""

    def __init__(self, generator: CompletionGenerator) -> None:
        self.generator = generator

    def candidates(self, predicate: ExternalPredicate | None = None) -> Iterator[str]:
        entries = self.generator("", predicate, True)
        if entries is None:
            return
        if isinstance(entries, str) or not isinstance(entries, Sequence):
            raise UnsupportedSourceError(
                f"Completion generator returned {type(entries).__name__}, "
                f"expected a sequence"
            )
        # The generator already applied the predicate
        yield from SequenceSource(entries).candidates()


def _is_pair(entry: object) -> bool:
    return isinstance(entry, tuple) and len(entry) == 2


def as_source(collection: object) -> CandidateSource:
    """Wrap a raw completion table in the matching candidate source.

    Args:
        collection: A ``CandidateSource``, a completion generator, a
            mapping, a set of symbols, a list of (key, value) pairs, or a
            list/tuple/set of strings and symbols.

    Raises:
        UnsupportedSourceError: If the collection is none of these.
    """
    if isinstance(collection, CandidateSource):
        return collection

    if isinstance(collection, str | bytes):
        raise UnsupportedSourceError(
            "A bare string is not a candidate source; wrap it in a list"
        )

    if isinstance(collection, Mapping):
        return FrequencyTableSource(collection)

    if isinstance(collection, set | frozenset):
        if collection and all(isinstance(entry, Symbol) for entry in collection):
            return NameTableSource(collection)
        return SequenceSource(collection)

    if isinstance(collection, list | tuple):
        if collection and all(_is_pair(entry) for entry in collection):
            return AssociativeListSource(collection)
        return SequenceSource(collection)

    if callable(collection):
        return GeneratorSource(collection)

    raise UnsupportedSourceError(
        f"Unsupported candidate source: {type(collection).__name__}"
    )
