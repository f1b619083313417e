from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from stockroom.domain.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _identity_key(item: Any) -> Hashable:
    return item.key


class EntityRepository(Generic[T]):
    """In-memory store of entities keyed by identity.

    - Entities expose their identity through ``key`` (see
      :class:`stockroom.domain.interfaces.Identified`) unless an explicit
      ``key`` selector is passed.
    - A single insertion-ordered ``dict`` backs both uniqueness and listing
      order.
    - Every failure is raised as a :mod:`stockroom.domain.exceptions` error;
      nothing is printed or swallowed here.
    """

    def __init__(
        self, key: Optional[Callable[[T], Hashable]] = None, *, label: str = "Item"
    ) -> None:
        self._key: Callable[[T], Hashable] = key or _identity_key
        self._items: Dict[Hashable, T] = {}
        self._label = label

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def add(self, item: T) -> None:
        """Insert ``item``; an existing entity with the same key is never overwritten."""
        key = self._key(item)
        if key in self._items:
            raise DuplicateKeyError(key, label=self._label)
        self._items[key] = item
        logger.debug("Entity added", extra={"key": key, "entity": type(item).__name__})

    def get_by_id(self, key: Hashable) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(key, label=self._label) from None

    def remove(self, key: Hashable) -> None:
        if key not in self._items:
            raise NotFoundError(
                key, f"Cannot remove: {self._label} with ID {key} not found.", label=self._label
            )
        del self._items[key]
        logger.debug("Entity removed", extra={"key": key})

    def update(self, item: T) -> None:
        """Replace the entity stored under ``item``'s key, keeping its position."""
        key = self._key(item)
        if key not in self._items:
            raise NotFoundError(key, label=self._label)
        self._items[key] = item
        logger.debug("Entity replaced", extra={"key": key})

    def update_field(
        self,
        key: Hashable,
        field: str,
        mutator: Callable[[Any], Any],
        *,
        validator: Optional[Callable[[Any], None]] = None,
    ) -> T:
        """Apply ``mutator`` to one mutable field of the entity at ``key``.

        The new value is computed from the current one, checked by
        ``validator`` (which signals rejection by raising ``ValueError``) and,
        for Pydantic entities, by the model's own field constraints. Only a
        value that passes every check is assigned, so a rejected update
        leaves the stored entity exactly as it was. A ``ValueError`` or
        ``TypeError`` from ``mutator`` or ``validator`` is reported as
        :class:`InvalidValueError`.

        >>> from stockroom.domain.entities import ElectronicItem
        >>> repo = EntityRepository[ElectronicItem]()
        >>> repo.add(ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=24))
        >>> repo.update_field(1, "quantity", lambda q: q + 3).quantity
        8
        """
        item = self.get_by_id(key)
        if not hasattr(item, field):
            raise InvalidValueError(field, f"{type(item).__name__} has no field {field!r}.")

        try:
            new_value = mutator(getattr(item, field))
            if validator is not None:
                validator(new_value)
            new_value = self._checked_value(item, key, field, new_value)
        except (ValueError, TypeError) as exc:
            raise InvalidValueError(field, str(exc)) from exc

        setattr(item, field, new_value)
        logger.debug("Entity field updated", extra={"key": key, "field": field})
        return item

    def _checked_value(self, item: T, key: Hashable, field: str, value: Any) -> Any:
        """Validate ``value`` against a copy of ``item`` and return the coerced value."""
        if isinstance(item, BaseModel):
            info = type(item).model_fields.get(field)
            if info is None or info.frozen or type(item).model_config.get("frozen"):
                raise ValueError(f"Field {field!r} cannot be changed.")
            # ValidationError subclasses ValueError
            candidate = type(item).model_validate({**dict(item), field: value})
        else:
            candidate = copy.copy(item)
            try:
                setattr(candidate, field, value)
            except AttributeError as exc:
                raise ValueError(f"Field {field!r} cannot be changed.") from exc
        if self._key(candidate) != key:
            raise ValueError("Key fields are immutable.")
        return getattr(candidate, field)

    def get_all(self) -> List[T]:
        """Return a snapshot list in insertion order."""
        return list(self._items.values())

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching ``predicate`` or ``None``."""
        for item in self._items.values():
            if predicate(item):
                return item
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if predicate(item)]


def group_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """Group ``items`` by a derived key, preserving input order within each group.

    Used by callers to build foreign-key lookups from a repository snapshot;
    the result is a one-off index and is not kept in sync with the source.
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
