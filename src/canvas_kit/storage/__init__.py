from .base import EntityStore, Record
from .json_store import JsonEntityStore

__all__ = [
    "EntityStore",
    "JsonEntityStore",
    "Record",
]
