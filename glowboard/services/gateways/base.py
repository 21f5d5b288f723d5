import logging
from typing import Any, Awaitable, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from glowboard.core.exceptions import GatewayError, GlowBoardError, RecordNotFoundError
from glowboard.db.document_store import DocumentStore

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)  # Type for the entity schema

# Fields the store assigns; never written by callers
STORE_FIELDS = {"id", "created_at", "updated_at"}


class BaseGateway(Generic[T]):
    """Base gateway standardizing CRUD access to one document collection.

    Every read goes to the store; nothing is cached between calls. Provider
    failures are logged here and replaced by a GatewayError naming only the
    operation and the collection.
    """

    collection_name: str = None
    schema_class: Type[T] = None

    def __init__(self, store: DocumentStore):
        self.store = store

    def to_schema(self, document: Dict) -> T:
        """Convert a stored document to the entity schema."""
        return self.schema_class.model_validate(document)

    @staticmethod
    def to_document(data: Union[BaseModel, Dict[str, Any]], partial: bool = False) -> Dict[str, Any]:
        """Convert input to a JSON-ready dict without store-assigned fields."""
        if isinstance(data, BaseModel):
            payload = data.model_dump(mode="json", exclude_unset=partial)
        else:
            payload = to_jsonable_python(dict(data))
        return {k: v for k, v in payload.items() if k not in STORE_FIELDS}

    async def _run(self, verb: str, operation: Awaitable, failure_message: Optional[str] = None):
        try:
            return await operation
        except GlowBoardError:
            raise
        except Exception as e:
            logger.error(f"Error during {verb} on {self.collection_name}: {e}", exc_info=True)
            raise GatewayError(failure_message or f"Failed to {verb} {self.collection_name}") from None

    async def list(self) -> List[T]:
        documents = await self._run("fetch", self.store.list(self.collection_name))
        return [self.to_schema(document) for document in documents]

    async def get(self, id: str) -> T:
        document = await self._run("fetch", self.store.get(self.collection_name, id))
        if document is None:
            raise RecordNotFoundError(f"{self.collection_name} not found")
        return self.to_schema(document)

    async def create(self, data: Union[BaseModel, Dict[str, Any]]) -> T:
        document = await self._run(
            "create",
            self.store.create(self.collection_name, self.to_document(data))
        )
        return self.to_schema(document)

    async def update(self, id: str, data: Union[BaseModel, Dict[str, Any]]) -> T:
        """Merge the supplied fields into the stored document."""
        document = await self._run(
            "update",
            self.store.update(self.collection_name, id, self.to_document(data, partial=True))
        )
        if document is None:
            raise RecordNotFoundError(f"{self.collection_name} not found")
        return self.to_schema(document)

    async def delete(self, id: str) -> None:
        await self._run("delete", self.store.delete(self.collection_name, id))
