"""Polynomials kept as terms in ascending order of exponent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union


@dataclass(frozen=True)
class Term:
    """One term ``coef * x^exp``."""

    coef: float
    exp: int

    def __str__(self) -> str:
        return f"{self.coef:.1f}x^{self.exp}"


TermLike = Union[Term, Tuple[float, int]]


class Polynomial:
    """Sum of terms; terms with equal exponents are combined, zero results kept."""

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        merged: dict[int, float] = {}
        for item in terms:
            term = item if isinstance(item, Term) else Term(*item)
            merged[term.exp] = merged.get(term.exp, 0.0) + term.coef
        self._terms = tuple(Term(coef, exp) for exp, coef in sorted(merged.items()))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([*self, *other])

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __str__(self) -> str:
        parts = []
        for position, term in enumerate(self._terms):
            sign = "+" if position and term.coef >= 0 else ""
            parts.append(f"{sign}{term}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._terms)!r})"