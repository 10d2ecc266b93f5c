"""
Tagged outcomes for multi-step service workflows.

Each step of a workflow returns either ``Success(value)`` or
``Failure(error)`` instead of raising. The caller inspects the outcome and
decides whether to continue or to abort (and roll back) explicitly.

Example::

    outcome = resolve_rate(scope, vendor_id=vendor.id, scrap_type_id=scrap_id)
    if outcome.failed:
        scope.rollback()
        return outcome
    rate = outcome.value
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union


T = TypeVar('T')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A step completed and produced ``value``."""

    value: T = None

    ok = True
    failed = False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A step failed with a domain exception instance."""

    error: Exception

    ok = False
    failed = True

    @property
    def code(self) -> str:
        return getattr(self.error, 'code', type(self.error).__name__)

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> Any:
        raise self.error


Outcome = Union[Success, Failure]
