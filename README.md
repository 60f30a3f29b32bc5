# lintre

`lintre` is a small interpreter for an untyped lambda calculus. It supports
named definitions and `;`-separated sequences. When a function is evaluated,
its parameters and the parameters of any functions nested inside it are
renamed to fresh names such as `x$1`. This prevents variable capture.

## Language

- A **word** is a run of letters, digits or `_`. If the word is bound, it
  evaluates to its binding. If it is not bound, it evaluates to itself.
- **Application** is written as words next to each other. `f x y` applies
  `f` to `x`, then applies the result to `y`. Only plain words can appear in
  an application chain.
- A **function** is `L` followed by its parameters, a `.`, and a body, for
  example `Lx y. x`. Parameters are separated by spaces. An expression that
  starts with `L` is always read as a function.
- **Parentheses** group a single expression, for example `(Lx. x)`.
- A **definition** is `name = expr`. The body is one function, one
  parenthesised expression, or one application chain.
- A **sequence** separates expressions with `;`. The definitions in it are
  bound in order. The result is the value of the last expression that is not
  a definition. If there is no such expression, the result is `()`.

Parsing stops at the first expression that is not followed by `;`. Any text
after that point is ignored.

Example program:

```
true = Lx y. x;
false = Lx y. y;
true a b
```

Evaluating it prints `a`.

If a result equals a value bound by a definition, the definition's name is
printed. Otherwise the value is printed as a word or in the form
`(λx$1 y$1 . x$1)`.

## Command line

```
lintre program.lc
lintre -b program.lc
```

With `-b`, every β-reduction step is printed to standard output, together with
the environment it runs in.

Exit status and messages:

- If the arguments are wrong, a usage line is printed to standard error and
  the exit status is 1.
- If the file cannot be read, the exit status is 1.
- If the file cannot be parsed, `Parse error: ...` is printed and the exit
  status is 1.
- If evaluation fails, `Error: ...` is printed to standard error and the exit
  status is 0. Evaluation fails when the same reduction state is reached
  twice (`Infinite β-reduction loop detected!`) or when a value that is not a
  function is applied (`Trying to apply non-function!`).

There is no interactive prompt. Programs are always read from a file.

## Library use

```python
from lintre.parser import parse
from lintre.interpreter import Interpreter

interp = Interpreter(debug=False)
value = interp.eval(parse("id = Lx. x; id hello"))
print(interp.format_result(value))  # hello
```

- `lintre.parser.parse(source)` and `Parser(source).parse()` return a tree
  built from the node classes in `lintre.ast`: `Word`, `Words`, `Function`,
  `Define`, `Sequence` and `Paren`.
- `Interpreter.eval(expr)` returns either a `Closure` or a `WordValue`.
- `Interpreter.format_result(value)` renders a value. It prefers the name of
  the definition the value is bound to.
- `pretty_expr(expr)` and `pretty_value(value)` render trees and values as
  text.

Errors:

- `lintre.parser.ParseError`, a subclass of `ValueError`, is raised when the
  input is malformed.
- `lintre.interpreter.EvalError` is raised when evaluation fails.

## Running the tests

```
pip install -e .[test]
pytest
```