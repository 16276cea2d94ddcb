# campus_aid/backend/app/services/entity_store.py

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy import asc, desc, inspect
from sqlalchemy.orm import Session

from ..errors import NotFound, ValidationFailure
from ..models import (
    CampusLocation,
    ChatMessage,
    Lecture,
    Notice,
    QRCode,
    Syllabus,
    Ticket,
    User,
)

logger = logging.getLogger(__name__)

# Collection name -> ORM model
COLLECTIONS: Dict[str, Any] = {
    "users": User,
    "tickets": Ticket,
    "notices": Notice,
    "lectures": Lecture,
    "syllabus": Syllabus,
    "locations": CampusLocation,
    "qr_codes": QRCode,
    "ai_chats": ChatMessage,
}

# Operators that translate to SQL. "array-contains" is evaluated in Python
# because JSON list membership is not portable across backends.
_SQL_OPERATORS: Dict[str, Callable[[Any, Any], Any]] = {
    "==": lambda col, v: col == v,
    "!=": lambda col, v: col != v,
    "<": lambda col, v: col < v,
    "<=": lambda col, v: col <= v,
    ">": lambda col, v: col > v,
    ">=": lambda col, v: col >= v,
    "in": lambda col, v: col.in_(list(v)),
}
ARRAY_CONTAINS = "array-contains"

Where = Tuple[str, str, Any]


class _Subscription:
    def __init__(self, callback, where: Optional[Where], order_field: Optional[str], direction: str):
        self.callback = callback
        self.where = where
        self.order_field = order_field
        self.direction = direction


# Live subscriptions are process-wide, keyed by collection
_subscriptions: Dict[str, List[_Subscription]] = {}
_subscriptions_lock = threading.Lock()


class EntityStore:
    """
    Collection-addressed CRUD over SQLAlchemy.

    Every write commits on its own (last writer wins per row). Callers that
    need several rows written together build the ORM objects themselves and
    hand the root object to `create`, e.g. a ticket with its first
    activity log entry.
    """

    def __init__(self, db: Session):
        self.db = db

    # Lookups

    def _model(self, collection: str):
        model = COLLECTIONS.get(collection)
        if model is None:
            raise ValidationFailure(f"Unknown collection '{collection}'")
        return model

    def _column(self, model, field: str):
        columns = inspect(model).columns
        if field not in columns:
            raise ValidationFailure(f"Unknown field '{field}' on {model.__tablename__}")
        return getattr(model, field)

    def _query(
        self,
        collection: str,
        where: Optional[Where] = None,
        order_field: Optional[str] = None,
        direction: str = "desc",
    ) -> list:
        model = self._model(collection)
        query = self.db.query(model)
        post_filter = None

        if where is not None:
            field, op, value = where
            column = self._column(model, field)
            if op == ARRAY_CONTAINS:
                post_filter = (field, value)
            elif op in _SQL_OPERATORS:
                query = query.filter(_SQL_OPERATORS[op](column, value))
            else:
                raise ValidationFailure(f"Unsupported operator '{op}'")

        if order_field:
            column = self._column(model, order_field)
            if direction not in ("asc", "desc"):
                raise ValidationFailure(f"Unsupported order direction '{direction}'")
            query = query.order_by(desc(column) if direction == "desc" else asc(column))

        rows = query.all()
        if post_filter is not None:
            field, value = post_filter
            rows = [r for r in rows if value in (getattr(r, field) or [])]
        return rows

    # CRUD

    def create(self, collection: str, document: Dict[str, Any]):
        model = self._model(collection)
        entity = model(**document)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        self._notify(collection)
        return entity

    def update(self, collection: str, doc_id: str, updates: Dict[str, Any]):
        model = self._model(collection)
        entity = self.db.get(model, doc_id)
        if entity is None:
            raise NotFound(f"{collection} document '{doc_id}' not found")

        attrs = inspect(model).attrs.keys()
        for field, value in updates.items():
            if field == "id" or field not in attrs:
                raise ValidationFailure(f"Cannot update field '{field}' on {collection}")
            setattr(entity, field, value)

        self.db.commit()
        self.db.refresh(entity)
        self._notify(collection)
        return entity

    def delete(self, collection: str, doc_id: str) -> None:
        model = self._model(collection)
        entity = self.db.get(model, doc_id)
        if entity is None:
            raise NotFound(f"{collection} document '{doc_id}' not found")
        self.db.delete(entity)
        self.db.commit()
        self._notify(collection)

    def get_by_id(self, collection: str, doc_id: str):
        return self.db.get(self._model(collection), doc_id)

    def get_all(self, collection: str, order_field: Optional[str] = None, direction: str = "desc") -> list:
        return self._query(collection, order_field=order_field, direction=direction)

    def get_where(self, collection: str, field: str, op: str, value: Any) -> list:
        return self._query(collection, where=(field, op, value))

    def get_ordered_where(
        self,
        collection: str,
        field: str,
        op: str,
        value: Any,
        order_field: str,
        direction: str = "desc",
    ) -> list:
        return self._query(
            collection,
            where=(field, op, value),
            order_field=order_field,
            direction=direction,
        )

    def rollback(self) -> None:
        self.db.rollback()

    # Live subscriptions

    def subscribe(
        self,
        collection: str,
        callback: Callable[[list], None],
        where: Optional[Where] = None,
        order_field: Optional[str] = None,
        direction: str = "desc",
    ) -> Callable[[], None]:
        """
        Call `callback` with the matching documents now and again after
        every committed write to `collection` made through any EntityStore
        in this process. Returns a function that cancels the subscription.
        """
        self._model(collection)
        sub = _Subscription(callback, where, order_field, direction)
        with _subscriptions_lock:
            _subscriptions.setdefault(collection, []).append(sub)

        callback(self._query(collection, where, order_field, direction))

        def unsubscribe() -> None:
            with _subscriptions_lock:
                subs = _subscriptions.get(collection, [])
                if sub in subs:
                    subs.remove(sub)

        return unsubscribe

    def _notify(self, collection: str) -> None:
        with _subscriptions_lock:
            subs = list(_subscriptions.get(collection, []))
        for sub in subs:
            try:
                sub.callback(self._query(collection, sub.where, sub.order_field, sub.direction))
            except Exception:
                # A broken listener must not fail the write that already committed
                logger.exception("Subscriber callback failed for collection %s", collection)
