"""Evaluator for the lambda language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .ast import Define, Expr, Function, Paren, Sequence, Word, Words


class EvalError(Exception):
    """Raised when evaluation fails."""


@dataclass(frozen=True)
class Closure:
    """A function value with its captured environment."""

    params: tuple[str, ...]
    body: Expr
    env: dict = field(default_factory=dict)


@dataclass(frozen=True)
class WordValue:
    """An unbound word evaluated to itself."""

    name: str


Value = Union[Closure, WordValue]


def pretty_expr(expr: Expr) -> str:
    """Render an expression as text."""
    if isinstance(expr, Word):
        return expr.name
    if isinstance(expr, Words):
        return " ".join(pretty_expr(e) for e in expr.items)
    if isinstance(expr, Function):
        return f"(λ{' '.join(expr.params)} . {pretty_expr(expr.body)})"
    if isinstance(expr, Define):
        return f"{expr.name} = {pretty_expr(expr.body)}"
    if isinstance(expr, Sequence):
        return "; ".join(pretty_expr(e) for e in expr.exprs)
    if isinstance(expr, Paren):
        return f"({pretty_expr(expr.inner)})"
    raise TypeError(f"not an expression: {expr!r}")


def pretty_value(value: Value) -> str:
    """Render a value as text."""
    if isinstance(value, WordValue):
        return value.name
    return f"(λ{' '.join(value.params)} . {pretty_expr(value.body)})"


class Interpreter:
    """Evaluates expressions by beta reduction over closures."""

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug
        self.env: dict[str, Value] = {}
        self._previous_states: set[str] = set()
        self._name_counter: dict[str, int] = {}

    def eval(self, expr: Expr) -> Value:
        """Evaluate an expression to a value."""
        if isinstance(expr, Word):
            return self.env.get(expr.name, WordValue(expr.name))
        if isinstance(expr, Words):
            if not expr.items:
                raise EvalError("Empty Words expression.")
            head, *rest = expr.items
            func = self.eval(head)
            for item in rest:
                func = self._apply(func, self.eval(item))
            return func
        if isinstance(expr, Function):
            fresh = tuple(self._fresh_name(p) for p in expr.params)
            mapping = dict(zip(expr.params, fresh))
            body = self._rename(expr.body, mapping)
            return Closure(fresh, body, dict(self.env))
        if isinstance(expr, Define):
            sub = Interpreter(self.debug)
            sub.env = dict(self.env)
            value = sub.eval(expr.body)
            self.env[expr.name] = value
            return value
        if isinstance(expr, Sequence):
            last = None
            for item in expr.exprs:
                if isinstance(item, Define):
                    self.env[item.name] = self.eval(item.body)
                else:
                    last = item
            if last is None:
                return WordValue("()")
            return self.eval(last)
        if isinstance(expr, Paren):
            return self.eval(expr.inner)
        raise TypeError(f"not an expression: {expr!r}")

    def _apply(self, func: Value, arg: Value) -> Value:
        if not isinstance(func, Closure):
            raise EvalError("Trying to apply non-function!")
        if not func.params:
            raise EvalError("No parameter left to apply!")
        param, *remaining = func.params
        env = dict(func.env)
        env[param] = arg

        if self.debug:
            print("--- β-reduction step ---")
            print(f"Applying: {pretty_expr(func.body)}")
            print("With environment:")
            for name, value in env.items():
                print(f"  {name} = {pretty_value(value)}")
            print()

        state_key = f"{pretty_expr(func.body)} {sorted(env)}"
        if state_key in self._previous_states:
            raise EvalError("Infinite β-reduction loop detected!")
        self._previous_states.add(state_key)

        if remaining:
            return Closure(tuple(remaining), func.body, env)
        nested = Interpreter(self.debug)
        nested.env = env
        nested._name_counter = dict(self._name_counter)
        nested._previous_states = set(self._previous_states)
        return nested.eval(func.body)

    def format_result(self, value: Value) -> str:
        """Render a value, preferring the name it is bound to."""
        for name, bound in self.env.items():
            if bound == value:
                return name
        return pretty_value(value)

    def _fresh_name(self, base: str) -> str:
        count = self._name_counter.get(base, 0) + 1
        self._name_counter[base] = count
        return f"{base}${count}"

    def _rename(self, expr: Expr, mapping: dict[str, str]) -> Expr:
        if isinstance(expr, Word):
            return Word(mapping.get(expr.name, expr.name))
        if isinstance(expr, Words):
            return Words(tuple(self._rename(e, mapping) for e in expr.items))
        if isinstance(expr, Function):
            inner = dict(mapping)
            params = []
            for p in expr.params:
                fresh = self._fresh_name(p)
                inner[p] = fresh
                params.append(fresh)
            return Function(tuple(params), self._rename(expr.body, inner))
        if isinstance(expr, Define):
            return Define(expr.name, self._rename(expr.body, mapping))
        if isinstance(expr, Sequence):
            return Sequence(tuple(self._rename(e, mapping) for e in expr.exprs))
        if isinstance(expr, Paren):
            return Paren(self._rename(expr.inner, mapping))
        raise TypeError(f"not an expression: {expr!r}")