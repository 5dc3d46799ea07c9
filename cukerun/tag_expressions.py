"""Parser and evaluator for Cucumber tag expressions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum

__all__ = ["TagExpressionError", "TagExpression", "parse"]


class TagExpressionError(ValueError):
    """Raised when a tag expression cannot be parsed."""


class TagExpression(ABC):
    """A parsed tag expression that can be evaluated against a set of tags."""

    def evaluate(self, tags: Iterable[str]) -> bool:
        """Return whether the given tag names satisfy the expression."""
        return self._matches(frozenset(tags))

    @abstractmethod
    def _matches(self, tags: frozenset[str]) -> bool:
        ...


class _Literal(TagExpression):
    def __init__(self, name: str) -> None:
        self.name = name

    def _matches(self, tags: frozenset[str]) -> bool:
        return self.name in tags

    def __str__(self) -> str:
        escaped = []
        for ch in self.name:
            if ch in "\\()" or ch.isspace():
                escaped.append("\\")
            escaped.append(ch)
        return "".join(escaped)


class _And(TagExpression):
    def __init__(self, left: TagExpression, right: TagExpression) -> None:
        self.left, self.right = left, right

    def _matches(self, tags: frozenset[str]) -> bool:
        return self.left._matches(tags) and self.right._matches(tags)

    def __str__(self) -> str:
        return f"( {self.left} and {self.right} )"


class _Or(TagExpression):
    def __init__(self, left: TagExpression, right: TagExpression) -> None:
        self.left, self.right = left, right

    def _matches(self, tags: frozenset[str]) -> bool:
        return self.left._matches(tags) or self.right._matches(tags)

    def __str__(self) -> str:
        return f"( {self.left} or {self.right} )"


class _Not(TagExpression):
    def __init__(self, operand: TagExpression) -> None:
        self.operand = operand

    def _matches(self, tags: frozenset[str]) -> bool:
        return not self.operand._matches(tags)

    def __str__(self) -> str:
        if isinstance(self.operand, (_And, _Or)):
            return f"not {self.operand}"
        return f"not ( {self.operand} )"


class _True(TagExpression):
    def _matches(self, tags: frozenset[str]) -> bool:
        return True

    def __str__(self) -> str:
        return "true"


class _Expect(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"


# operator -> (precedence, left associative)
_OPERATORS = {"or": (0, True), "and": (1, True), "not": (2, False)}
_BINARY = {"or", "and"}

_OPEN = ("paren", "(")
_CLOSE = ("paren", ")")


def _error(expression: str, detail: str) -> TagExpressionError:
    return TagExpressionError(
        f'Tag expression "{expression}" could not be parsed because of syntax error: {detail}'
    )


def _tokenize(expression: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    buffer: list[str] = []
    escaped = False

    def flush() -> None:
        if buffer:
            word = "".join(buffer)
            kind = "operator" if word in _OPERATORS else "literal"
            tokens.append((kind, word))
            buffer.clear()

    for ch in expression:
        if escaped:
            if ch in "()\\" or ch.isspace():
                buffer.append(ch)
                escaped = False
            else:
                raise _error(expression, f'Illegal escape before "{ch}".')
        elif ch == "\\":
            escaped = True
        elif ch.isspace():
            flush()
        elif ch in "()":
            flush()
            tokens.append(("paren", ch))
        else:
            buffer.append(ch)
    if escaped:
        raise _error(expression, "Expression ends with an escape character.")
    flush()
    return tokens


def _apply(expression: str, operator: str, output: list[TagExpression]) -> None:
    if operator in _BINARY:
        if len(output) < 2:
            raise _error(expression, "Expression is incomplete.")
        right = output.pop()
        left = output.pop()
        output.append(_And(left, right) if operator == "and" else _Or(left, right))
    else:
        if not output:
            raise _error(expression, "Expression is incomplete.")
        output.append(_Not(output.pop()))


def parse(expression: str) -> TagExpression:
    """Parse a tag expression such as ``(@smoke or @ui) and not @slow``."""
    tokens = _tokenize(expression)
    if not tokens:
        return _True()

    output: list[TagExpression] = []
    operators: list[tuple[str, str]] = []
    expected = _Expect.OPERAND

    def check(wanted: _Expect) -> None:
        if expected is not wanted:
            raise _error(expression, f"Expected {wanted.value}.")

    for token in tokens:
        kind, value = token
        if kind == "operator" and value == "not":
            check(_Expect.OPERAND)
            operators.append(token)
            expected = _Expect.OPERAND
        elif kind == "operator":
            check(_Expect.OPERATOR)
            precedence, left_assoc = _OPERATORS[value]
            while operators and operators[-1][0] == "operator":
                top_precedence = _OPERATORS[operators[-1][1]][0]
                if (left_assoc and precedence <= top_precedence) or (
                    not left_assoc and precedence < top_precedence
                ):
                    _apply(expression, operators.pop()[1], output)
                else:
                    break
            operators.append(token)
            expected = _Expect.OPERAND
        elif token == _OPEN:
            check(_Expect.OPERAND)
            operators.append(token)
            expected = _Expect.OPERAND
        elif token == _CLOSE:
            check(_Expect.OPERATOR)
            while operators and operators[-1] != _OPEN:
                _apply(expression, operators.pop()[1], output)
            if not operators:
                raise _error(expression, "Unmatched ).")
            operators.pop()
            expected = _Expect.OPERATOR
        else:
            check(_Expect.OPERAND)
            output.append(_Literal(value))
            expected = _Expect.OPERATOR

    while operators:
        token = operators.pop()
        if token == _OPEN:
            raise _error(expression, "Unmatched (.")
        _apply(expression, token[1], output)

    if len(output) != 1:
        raise _error(expression, "Expression is incomplete.")
    return output[0]