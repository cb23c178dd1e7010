"""
Present / Absent result type

Endpoints that may legitimately have no data (e.g. an unknown test id, a test
run without results) return ``Present(value)`` or ``ABSENT``. Failures are
raised as exceptions instead, so "not found" and "something broke" never look
the same to the caller.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from webmate.api.exceptions import WebmateApiClientException

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that was returned by the server"""
    value: T

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def or_else(self, default):
        return self.value

    def map(self, fn: Callable[[T], U]) -> 'Present[U]':
        return Present(fn(self.value))


class Absent:
    """No value; the server reported that there is nothing to return"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_present(self) -> bool:
        return False

    def get(self):
        raise WebmateApiClientException("No value present")

    def or_else(self, default):
        return default

    def map(self, fn) -> 'Absent':
        return self

    def __repr__(self):
        return "ABSENT"


ABSENT = Absent()

OptionalResult = Union[Present[T], Absent]
