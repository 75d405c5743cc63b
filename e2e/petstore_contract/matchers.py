"""Body matchers used by the scenario table.

A matcher is a callable taking the parsed body and returning None when it
matches, or a short description of the first difference.
"""

from typing import Any, Callable

Matcher = Callable[[Any], str | None]


class _AnyInstance:
    def __init__(self, *types: type):
        self.types = types

    def matches(self, value: Any) -> bool:
        # bool is an int subclass but never a valid id.
        if isinstance(value, bool) and bool not in self.types:
            return False
        return isinstance(value, self.types)

    def __repr__(self) -> str:
        return "any_instance(" + ", ".join(t.__name__ for t in self.types) + ")"


def any_instance(*types: type) -> _AnyInstance:
    """Placeholder that matches any value of the given type(s)."""
    return _AnyInstance(*types)


def _diff(expected: Any, actual: Any, where: str) -> str | None:
    if isinstance(expected, _AnyInstance):
        if expected.matches(actual):
            return None
        return f"{where}: expected {expected!r}, got {actual!r}"
    if isinstance(expected, dict):
        if not isinstance(actual, dict):
            return f"{where}: expected an object, got {actual!r}"
        for key, value in expected.items():
            if key not in actual:
                return f"{where}.{key}: missing"
            found = _diff(value, actual[key], f"{where}.{key}")
            if found:
                return found
        return None
    if expected != actual:
        return f"{where}: expected {expected!r}, got {actual!r}"
    return None


def contains(expected: dict[str, Any]) -> Matcher:
    """Body is an object holding at least these keys with these values."""
    def match(body: Any) -> str | None:
        return _diff(expected, body, "body")
    return match


def equals(expected: Any) -> Matcher:
    def match(body: Any) -> str | None:
        if body != expected:
            return f"body: expected {expected!r}, got {body!r}"
        return None
    return match


def empty_object() -> Matcher:
    return equals({})


def every_item(expected: dict[str, Any]) -> Matcher:
    """Body is a list and every element contains `expected`."""
    def match(body: Any) -> str | None:
        if not isinstance(body, list):
            return f"body: expected a list, got {body!r}"
        for index, item in enumerate(body):
            found = _diff(expected, item, f"body[{index}]")
            if found:
                return found
        return None
    return match
