import copy
import itertools
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

import pytest

from glowboard.core.identity import Identity, IdentityProvider
from glowboard.db.document_store import DocumentStore, Filter
from glowboard.schemas.user import User

TODAY = date(2024, 5, 15)


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store with the same contract as the SQL store."""

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict]] = {}
        self.settings: Dict[str, Any] = {}
        self._clock = itertools.count()

    def _now(self) -> datetime:
        # Strictly increasing so creation order is observable
        return datetime(2024, 5, 1, tzinfo=timezone.utc) + timedelta(seconds=next(self._clock))

    def _documents(self, collection: str) -> Dict[str, Dict]:
        return self.collections.setdefault(collection, {})

    @staticmethod
    def _matches(document: Dict, f: Filter) -> bool:
        name, op, value = f
        field = document.get(name)
        if field is None:
            return False
        if op == "==":
            return field == value
        if op == ">=":
            return field >= value
        if op == "<=":
            return field <= value
        raise ValueError(f"Unsupported filter operator: {op}")

    async def list(self, collection: str) -> List[Dict]:
        return [copy.deepcopy(d) for d in self._documents(collection).values()]

    async def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Dict]:
        documents = [
            d for d in await self.list(collection)
            if all(self._matches(d, f) for f in filters)
        ]
        if order_by:
            documents.sort(key=lambda d: d.get(order_by), reverse=descending)
        return documents

    async def get(self, collection: str, id: str) -> Optional[Dict]:
        document = self._documents(collection).get(id)
        return copy.deepcopy(document) if document else None

    async def create(self, collection: str, data: Dict) -> Dict:
        now = self._now()
        document = {**copy.deepcopy(data), "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        self._documents(collection)[document["id"]] = document
        return copy.deepcopy(document)

    async def update(self, collection: str, id: str, data: Dict) -> Optional[Dict]:
        document = self._documents(collection).get(id)
        if document is None:
            return None
        document.update(copy.deepcopy(data))
        document["updated_at"] = self._now()
        return copy.deepcopy(document)

    async def delete(self, collection: str, id: str) -> bool:
        return self._documents(collection).pop(id, None) is not None

    async def get_setting(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self.settings.get(key))

    async def set_setting(self, key: str, value: Any) -> None:
        self.settings[key] = copy.deepcopy(value)


class FailingDocumentStore(DocumentStore):
    """Store whose every call fails like an unreachable backend."""

    def __init__(self, error: Exception = None):
        self.error = error or ConnectionError("connection refused by db-host:5432")

    async def list(self, collection):
        raise self.error

    async def query(self, collection, filters=(), order_by=None, descending=False):
        raise self.error

    async def get(self, collection, id):
        raise self.error

    async def create(self, collection, data):
        raise self.error

    async def update(self, collection, id, data):
        raise self.error

    async def delete(self, collection, id):
        raise self.error

    async def get_setting(self, key):
        raise self.error

    async def set_setting(self, key, value):
        raise self.error


class FakeIdentityProvider(IdentityProvider):
    def __init__(
        self,
        identity: Optional[Identity] = None,
        sign_in_error: Optional[Exception] = None,
        sign_out_error: Optional[Exception] = None
    ):
        self.identity = identity
        self.sign_in_error = sign_in_error
        self.sign_out_error = sign_out_error

    async def current_identity(self) -> Optional[Identity]:
        return self.identity

    async def sign_in(self) -> Identity:
        if self.sign_in_error:
            raise self.sign_in_error
        return self.identity

    async def sign_out(self) -> None:
        if self.sign_out_error:
            raise self.sign_out_error
        self.identity = None


class ProviderError(Exception):
    """Error carrying a provider error code, like the hosted sign-in SDK raises."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def failing_store():
    return FailingDocumentStore()


@pytest.fixture
def admin_user():
    return User(id="admin-1", email="owner@glowboard.test", full_name="Olivia Owner",
                location="Flatiron", is_admin=True)


@pytest.fixture
def staff_user():
    return User(id="staff-1", email="sam@glowboard.test", full_name="Sam Staff",
                location="Midtown", is_admin=False)


@pytest.fixture
def make_identity_provider():
    return FakeIdentityProvider


@pytest.fixture
def provider_error():
    return ProviderError
