"""Repository implementations.

:mod:`repositories.entity_repository` holds the in-memory, identity-keyed
store and :mod:`repositories.json_log` its optional JSON file mirror.
"""

from .entity_repository import EntityRepository, group_by
from .json_log import JsonLog, LoadResult

__all__ = ["EntityRepository", "JsonLog", "LoadResult", "group_by"]
