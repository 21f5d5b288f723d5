from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import and_, select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from glowboard.db.models.document import Document
from glowboard.db.models.settings_document import SettingsDocument

# (field, operator, value); operator is one of "==", ">=", "<="
Filter = Tuple[str, str, Any]

TIMESTAMP_FIELDS = ("created_at", "updated_at")


class DocumentStore(ABC):
    """Abstract interface over the remote document database.

    Documents are plain dicts. The store assigns ``id``, ``created_at`` and
    ``updated_at``; callers never supply them.
    """

    @abstractmethod
    async def list(self, collection: str) -> List[Dict]:
        """Fetch every document of a collection."""
        pass

    @abstractmethod
    async def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Dict]:
        """Fetch the documents of a collection matching all filters."""
        pass

    @abstractmethod
    async def get(self, collection: str, id: str) -> Optional[Dict]:
        """Fetch one document, or None when it does not exist."""
        pass

    @abstractmethod
    async def create(self, collection: str, data: Dict) -> Dict:
        """Insert a document and return it with its assigned id and timestamps."""
        pass

    @abstractmethod
    async def update(self, collection: str, id: str, data: Dict) -> Optional[Dict]:
        """Merge the supplied fields into a document; None when it does not exist."""
        pass

    @abstractmethod
    async def delete(self, collection: str, id: str) -> bool:
        """Remove a document permanently. Returns False when it did not exist."""
        pass

    @abstractmethod
    async def get_setting(self, key: str) -> Optional[Any]:
        """Read a singleton settings document."""
        pass

    @abstractmethod
    async def set_setting(self, key: str, value: Any) -> None:
        """Replace a singleton settings document."""
        pass


class SQLDocumentStore(DocumentStore):
    """Document store kept in a relational database through SQLAlchemy."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @staticmethod
    def _to_dict(document: Document) -> Dict:
        return {
            **(document.data or {}),
            "id": document.id,
            "created_at": document.created_at,
            "updated_at": document.updated_at,
        }

    @staticmethod
    def _field(name: str):
        if name in TIMESTAMP_FIELDS:
            return getattr(Document, name)
        return Document.data[name].as_string()

    def _condition(self, f: Filter):
        name, op, value = f
        column = self._field(name)
        if op == "==":
            return column == value
        if op == ">=":
            return column >= value
        if op == "<=":
            return column <= value
        raise ValueError(f"Unsupported filter operator: {op}")

    async def _fetch(self, db: AsyncSession, collection: str, id: str) -> Optional[Document]:
        document = await db.get(Document, id)
        if document is None or document.collection != collection:
            return None
        return document

    async def list(self, collection: str) -> List[Dict]:
        return await self.query(collection)

    async def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Dict]:
        async with self._session_factory() as db:
            conditions = [Document.collection == collection]
            conditions.extend(self._condition(f) for f in filters)
            stmt = select(Document).where(and_(*conditions))
            if order_by:
                column = self._field(order_by)
                stmt = stmt.order_by(column.desc() if descending else column.asc())
            result = await db.execute(stmt)
            return [self._to_dict(document) for document in result.scalars().all()]

    async def get(self, collection: str, id: str) -> Optional[Dict]:
        async with self._session_factory() as db:
            document = await self._fetch(db, collection, id)
            return self._to_dict(document) if document else None

    async def create(self, collection: str, data: Dict) -> Dict:
        async with self._session_factory() as db:
            document = Document(collection=collection, data=dict(data))
            db.add(document)
            await db.commit()
            await db.refresh(document)
            return self._to_dict(document)

    async def update(self, collection: str, id: str, data: Dict) -> Optional[Dict]:
        async with self._session_factory() as db:
            document = await self._fetch(db, collection, id)
            if document is None:
                return None
            # Reassign so the JSON column is flagged dirty
            document.data = {**(document.data or {}), **data}
            document.updated_at = func.now()
            await db.commit()
            await db.refresh(document)
            return self._to_dict(document)

    async def delete(self, collection: str, id: str) -> bool:
        async with self._session_factory() as db:
            document = await self._fetch(db, collection, id)
            if document is None:
                return False
            await db.delete(document)
            await db.commit()
            return True

    async def get_setting(self, key: str) -> Optional[Any]:
        async with self._session_factory() as db:
            setting = await db.get(SettingsDocument, key)
            return setting.value if setting else None

    async def set_setting(self, key: str, value: Any) -> None:
        async with self._session_factory() as db:
            setting = await db.get(SettingsDocument, key)
            if setting:
                setting.value = value
                setting.updated_at = func.now()
            else:
                db.add(SettingsDocument(key=key, value=value))
            await db.commit()


def get_document_store() -> DocumentStore:
    """Build the default store bound to the configured database."""
    from glowboard.db.base import AsyncSessionLocal
    return SQLDocumentStore(AsyncSessionLocal)
