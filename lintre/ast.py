"""Syntax tree nodes for the lambda language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Word:
    """A bare identifier."""

    name: str


@dataclass(frozen=True)
class Words:
    """An application chain: the first item applied to each following item in turn."""

    items: tuple[Expr, ...]


@dataclass(frozen=True)
class Function:
    """A lambda abstraction over one or more parameters."""

    params: tuple[str, ...]
    body: Expr


@dataclass(frozen=True)
class Define:
    """A binding of a name to the value of an expression."""

    name: str
    body: Expr


@dataclass(frozen=True)
class Sequence:
    """A list of expressions separated by semicolons."""

    exprs: tuple[Expr, ...]


@dataclass(frozen=True)
class Paren:
    """A parenthesised expression."""

    inner: Expr


Expr = Union[Word, Words, Function, Define, Sequence, Paren]