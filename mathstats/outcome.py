"""Run a calculator and report success or a named failure as a value.

The calculators raise :class:`~mathstats.errors.StatisticsError` subclasses.
Callers that prefer to branch on a result instead of catching exceptions can
go through :func:`compute`, which returns either :class:`Success` or
:class:`Failure`.

Example:
    >>> from mathstats.dispersion import RawSampleStatistics
    >>> outcome = compute(RawSampleStatistics, [1, 2, 3, 4, 5])
    >>> outcome.ok, outcome.value.mean
    (True, 3.0)
    >>> compute(RawSampleStatistics, []).kind
    <ErrorKind.EMPTY_DATA_SET: 'empty_data_set'>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import ErrorKind, StatisticsError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: StatisticsError) -> "Failure":
        return cls(kind=error.kind, message=str(error))


Outcome = Union[Success[T], Failure]


def compute(factory: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Construct a calculator, run it once and wrap the result.

    Args:
        factory: Calculator class (or any callable returning an object with a
            ``run()`` method).
        *args: Positional arguments for ``factory``.
        **kwargs: Keyword arguments for ``factory``.

    Returns:
        Success | Failure: ``Success(result)`` when validation and the run
        step both pass, otherwise ``Failure`` naming the error kind.

    Note:
        Only input validation errors are converted. Any other exception
        propagates unchanged.
    """
    try:
        calculator = factory(*args, **kwargs)
        return Success(calculator.run())
    except StatisticsError as exc:
        return Failure.from_error(exc)
