from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class Identified(Protocol):
    """Anything exposing an immutable identity ``key``.

    >>> class Row:
    ...     def __init__(self, id: int) -> None:
    ...         self.id = id
    ...     @property
    ...     def key(self) -> int:
    ...         return self.id
    >>> isinstance(Row(1), Identified)
    True
    """

    @property
    def key(self) -> Hashable: ...
