# hems_scenarios/utils/result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Exactly one of ``data`` or ``error`` is meaningful.

    A result without an error is a success, including one whose payload is
    ``None`` (the wrapped call returned nothing). Setting both is rejected.
    """

    data: Optional[T] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if self.error is not None and self.data is not None:
            raise ValueError("Result cannot carry both data and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "Result[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(error=error)


def try_catch(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    try:
        return Result.success(func(*args, **kwargs))
    except Exception as e:
        return Result.failure(e)


async def try_catch_async(awaitable: Awaitable[T]) -> Result[T]:
    try:
        return Result.success(await awaitable)
    except Exception as e:
        return Result.failure(e)
