"""
Transactional storage scopes.

Workflows never reach for a global database handle. They receive a storage
object and open one atomic scope per invocation::

    with storage.atomic() as scope:
        ...
        if outcome.failed:
            scope.rollback()

Leaving the ``with`` block commits unless ``rollback()`` was called or an
exception escaped, in which case every write made through the scope is
undone. Tests substitute an in-memory implementation with the same methods.
"""

from contextlib import contextmanager

from django.db import transaction


class StorageScope:
    """One open atomic scope. Subclasses add the data operations."""

    def __init__(self):
        self.rolled_back = False

    def rollback(self) -> None:
        """Mark the scope so that nothing written through it is kept."""
        self.rolled_back = True


class DjangoStorageScope(StorageScope):
    """Scope backed by a ``transaction.atomic()`` block on the default database."""

    def rollback(self) -> None:
        super().rollback()
        transaction.set_rollback(True)


class DjangoStorage:
    """Factory of Django-backed scopes."""

    scope_class = DjangoStorageScope

    @contextmanager
    def atomic(self):
        with transaction.atomic():
            yield self.scope_class()
