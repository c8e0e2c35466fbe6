# src/todo_remote/core/result.py

"""
Outcome of an asynchronous data operation.

Exactly one variant is active:
- Loading: work is in flight (no value yet)
- Success(value): the operation produced a value
- Error(cause): the operation failed; cause is the exception

Consumers are expected to handle all three, e.g.:

    match result:
        case Success(value=tasks): ...
        case Error(cause=exc): ...
        case Loading(): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Loading:
    pass


LOADING = Loading()


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Error:
    cause: Exception

    @property
    def message(self) -> str:
        return str(self.cause)


Result = Union[Loading, Success[T], Error]
