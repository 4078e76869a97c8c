"""Entry listener registrations.

A registration bundles a listener with the options the dispatch subsystem
needs: an optional event filter, whether the event must carry the old
value, and whether dispatch is synchronous.

Registrations entering a configuration are always rebuilt as new
ListenerRegistration instances, so a caller's registration object, even a
mutable one, can never alias state held by a configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cacheconfig.protocols import CacheEntryEventFilter, EntryListenerRegistrationLike

__all__ = ["ListenerRegistration", "copy_registrations"]


@dataclass(frozen=True, slots=True)
class ListenerRegistration:
    """Immutable listener registration owned by a configuration.

    Equality is structural over all four fields; listeners and filters
    compare with their own ``__eq__`` (identity unless they define one).

    Attributes:
        listener: The entry listener (not validated; None is carried as-is)
        filter: Optional event filter
        old_value_required: Whether dispatched events must include the old value
        synchronous: Whether the listener is invoked synchronously
    """

    listener: Any
    filter: CacheEntryEventFilter | None = None
    old_value_required: bool = False
    synchronous: bool = False

    @classmethod
    def from_registration(cls, registration: EntryListenerRegistrationLike) -> ListenerRegistration:
        """Copy the four registration attributes into a new instance.

        Always returns a fresh object, even when ``registration`` is
        already a ListenerRegistration.
        """
        return cls(
            listener=registration.listener,
            filter=registration.filter,
            old_value_required=registration.old_value_required,
            synchronous=registration.synchronous,
        )


def copy_registrations(
    registrations: Iterable[EntryListenerRegistrationLike],
) -> tuple[ListenerRegistration, ...]:
    """Re-wrap every registration, preserving order and duplicates."""
    return tuple(ListenerRegistration.from_registration(r) for r in registrations)
