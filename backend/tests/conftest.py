import os
import random
import tempfile
from pathlib import Path

# Avant tout import de `app` : get_settings() est mis en cache au premier appel
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "states_api_test_logs"))
os.environ.setdefault("ENSURE_INDEXES_ON_STARTUP", "false")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.api.deps import get_funfact_store
from app.core.settings import DEFAULT_STATES_DATA
from app.main import create_app
from app.services.funfact_service import FunFactService
from app.services.funfact_store import FunFactStore
from app.services.reference_table import ReferenceTable
from app.services.states_service import StatesService


class _Result:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]


class FakeCollection:
    """Collection Motor en mémoire (sous-ensemble utilisé par FunFactStore)."""

    def __init__(self, docs=None):
        self.docs: list[dict] = []
        self.indexes: list[dict] = [{"name": "_id_", "key": {"_id": 1}}]
        self.fail_with: Exception | None = None
        for doc in docs or []:
            self.docs.append({"_id": ObjectId(), **doc})

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _match(self, doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    async def find_one(self, query):
        self._check()
        for doc in self.docs:
            if self._match(doc, query):
                return {**doc, "funfacts": list(doc.get("funfacts", []))}
        return None

    def find(self, query):
        self._check()
        return FakeCursor([dict(d) for d in self.docs if self._match(d, query)])

    async def insert_one(self, doc):
        self._check()
        if any(d["stateCode"] == doc["stateCode"] for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error")
        stored = {"_id": doc.get("_id") or ObjectId(), **{k: v for k, v in doc.items() if k != "_id"}}
        self.docs.append(stored)
        return _Result(inserted_id=stored["_id"])

    async def replace_one(self, query, doc):
        self._check()
        for i, existing in enumerate(self.docs):
            if self._match(existing, query):
                self.docs[i] = {**doc, "_id": existing["_id"], "funfacts": list(doc["funfacts"])}
                return _Result(matched_count=1, modified_count=1)
        return _Result(matched_count=0, modified_count=0)

    async def delete_one(self, query):
        self._check()
        for i, existing in enumerate(self.docs):
            if self._match(existing, query):
                del self.docs[i]
                return _Result(deleted_count=1)
        return _Result(deleted_count=0)

    async def list_indexes(self):
        for ix in list(self.indexes):
            yield ix

    async def drop_index(self, name):
        self.indexes = [ix for ix in self.indexes if ix["name"] != name]

    async def create_indexes(self, models):
        for model in models:
            spec = dict(model.document)
            self.indexes.append(spec)

    def add(self, state_code, funfacts):
        self.docs.append({"_id": ObjectId(), "stateCode": state_code, "funfacts": list(funfacts)})

    def stored(self, state_code):
        return next((d for d in self.docs if d["stateCode"] == state_code), None)


@pytest.fixture(scope="session")
def reference():
    return ReferenceTable.load(DEFAULT_STATES_DATA)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def failing_collection():
    coll = FakeCollection()
    coll.fail_with = PyMongoError("connection refused")
    return coll


@pytest.fixture
def store(collection):
    return FunFactStore(collection)


@pytest.fixture
def states_service(reference, store):
    return StatesService(reference, store, rng=random.Random(1234))


@pytest.fixture
def funfact_service(reference, store):
    return FunFactService(reference, store)


@pytest.fixture
def app(collection):
    fastapi_app = create_app()
    fastapi_app.dependency_overrides[get_funfact_store] = lambda: FunFactStore(collection)
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
