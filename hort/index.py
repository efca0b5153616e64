"""A document index stored in a MongoDB collection."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Mapping

from bson import json_util
from pymongo import MongoClient

MONGO_URI = "mongodb://localhost:27017"
DATABASE = "hortdb"


@lru_cache(maxsize=None)
def _default_database() -> Any:
    return MongoClient(MONGO_URI)[DATABASE]


def _to_json(document: Mapping[str, Any]) -> Any:
    return json.loads(
        json_util.dumps(document, json_options=json_util.RELAXED_JSON_OPTIONS)
    )


class Index:
    """Documents of one collection; database errors propagate as PyMongoError."""

    def __init__(self, collection: str, database: Any = None) -> None:
        db = database if database is not None else _default_database()
        self.name = collection
        self.collection = db[collection]

    def insert(self, document: Mapping[str, Any]) -> Any:
        """Insert a copy of ``document``; return its new id."""
        return self.collection.insert_one(dict(document)).inserted_id

    def query(self, filter: Mapping[str, Any] | None = None) -> list[Any]:
        """Return every document matching ``filter`` as JSON-compatible values."""
        return [_to_json(doc) for doc in self.collection.find(dict(filter or {}))]

    def update(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> None:
        """Apply ``update`` to the first document matching ``filter``."""
        self.collection.update_one(dict(filter), dict(update))

    def update_field(
        self, filter_key: str, filter_value: Any, update_key: str, update_value: Any
    ) -> None:
        """Set ``update_key`` on the first document whose ``filter_key`` matches."""
        self.collection.update_one(
            {filter_key: filter_value}, {"$set": {update_key: update_value}}
        )