"""Failure types raised by the harness.

Transport problems and contract mismatches are kept apart so a report can
tell "the service was unreachable" from "the service answered wrongly".
The mismatch types also subclass AssertionError, so pytest shows them as
plain test failures.
"""

from typing import Any


class HarnessError(Exception):
    pass


class ConfigError(HarnessError):
    pass


class TransportFailure(HarnessError):
    """The request never produced an HTTP response."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method} {url} failed: {type(cause).__name__}: {cause}")


class UnexpectedStatus(HarnessError, AssertionError):
    """A wrapper that requires a specific status received another one."""

    def __init__(self, operation: str, expected: int, status_code: int, body: Any):
        self.operation = operation
        self.expected = expected
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{operation}: expected status {expected}, got {status_code} with body {body!r}"
        )


class UnexpectedBody(HarnessError, AssertionError):
    """The status was right but the body did not have the documented shape."""

    def __init__(self, operation: str, detail: str, status_code: int, body: Any):
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{operation}: {detail} (status {status_code}, body {body!r})"
        )


class ExpectationMismatch(HarnessError, AssertionError):
    def __init__(self, scenario: str, detail: str, status_code: int, body: Any):
        self.scenario = scenario
        self.detail = detail
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"[{scenario}] {detail} (received status {status_code}, body {body!r})"
        )
