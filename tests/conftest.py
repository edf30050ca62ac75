"""Pytest configuration and fixtures for ownership-guard tests."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

import pytest
from fastapi import APIRouter, Depends, FastAPI, Request, Response

from ownership_guard import (
    AccessGuard,
    DescriptorRegistry,
    Disposition,
    InMemoryOwnershipQuery,
    OwnershipGuardSettings,
    RequireOwnership,
    setup_ownership_guard,
)


# Fixed ids for seeded resources so tests can rely on them
DOC1_ID = UUID("11111111-1111-1111-1111-111111111111")
DOC2_ID = UUID("22222222-2222-2222-2222-222222222222")
NOTE1_ID = UUID("33333333-3333-3333-3333-333333333333")
NOTE2_ID = UUID("44444444-4444-4444-4444-444444444444")
MISSING_ID = UUID("99999999-9999-9999-9999-999999999999")


@dataclass
class Document:
    id: UUID
    owner_id: str
    tenant_id: str
    title: str
    content: str = ""


@dataclass
class Note:
    id: UUID
    owner_id: str
    title: str


@dataclass
class StringDocument:
    id: str
    owner_id: Optional[str]
    tenant_id: Optional[str] = None


class Unregistered:
    pass


def seed_documents() -> List[Document]:
    return [
        Document(id=DOC1_ID, owner_id="user1", tenant_id="tenant1", title="User 1 Doc", content="Content 1"),
        Document(id=DOC2_ID, owner_id="user2", tenant_id="tenant2", title="User 2 Doc", content="Content 2"),
    ]


def seed_notes() -> List[Note]:
    return [
        Note(id=NOTE1_ID, owner_id="user1", title="User 1 Note"),
        Note(id=NOTE2_ID, owner_id="user2", title="User 2 Note"),
    ]


def make_settings(**overrides) -> OwnershipGuardSettings:
    return OwnershipGuardSettings(**overrides)


@pytest.fixture
def settings():
    """Default settings: existence is not hidden."""
    return make_settings()


@pytest.fixture
def hiding_settings():
    """Settings with existence-hiding enabled."""
    return make_settings(hide_existence_on_forbidden=True)


@pytest.fixture
def registry():
    """Fresh, isolated descriptor registry."""
    return DescriptorRegistry()


@pytest.fixture
def guard(settings, registry):
    return AccessGuard(settings, registry)


@pytest.fixture
def hiding_guard(hiding_settings, registry):
    return AccessGuard(hiding_settings, registry)


@pytest.fixture
def string_documents():
    """String-keyed documents, one per owner/tenant."""
    return [
        StringDocument(id="doc1", owner_id="user1", tenant_id="tenant1"),
        StringDocument(id="doc2", owner_id="user2", tenant_id="tenant2"),
        StringDocument(id="orphan", owner_id=None, tenant_id=None),
    ]


@pytest.fixture
def string_query(string_documents):
    return InMemoryOwnershipQuery(string_documents)


@dataclass
class RequestContext:
    """Minimal per-request context handing out data sources."""

    sources: dict
    created: List[str] = field(default_factory=list)

    def query_for(self, name: str) -> InMemoryOwnershipQuery:
        self.created.append(name)
        return self.sources[name]


def _claims_for(request: Request) -> Optional[dict]:
    if request.headers.get("X-Anonymous"):
        return None
    user_id = request.headers.get("X-User", "user1")
    tenant_id = request.headers.get("X-Tenant")
    if tenant_id is None:
        tenant_id = "tenant2" if user_id.lower() == "user2" else "tenant1"
    claims = {"sub": user_id}
    if tenant_id != "none":
        claims["tenant_id"] = tenant_id
    return claims


def build_app(settings: OwnershipGuardSettings) -> FastAPI:
    """Documents (tenant-scoped) and notes (owner-only) behind ownership checks."""
    app = FastAPI()
    registry = setup_ownership_guard(app, settings=settings)
    app.state.documents = seed_documents()
    app.state.notes = seed_notes()

    registry.register_typed(
        Document,
        lambda request: InMemoryOwnershipQuery(request.app.state.documents),
        id_field="id",
        owner_field="owner_id",
        key_type=UUID,
        tenant_field="tenant_id",
    )
    registry.register_typed(
        Note,
        lambda request: InMemoryOwnershipQuery(request.app.state.notes),
        id_field="id",
        owner_field="owner_id",
        key_type=UUID,
    )

    @app.middleware("http")
    async def fake_claims(request: Request, call_next):
        claims = _claims_for(request)
        if claims is not None:
            request.state.claims = claims
        return await call_next(request)

    def find_document(id: str) -> Optional[Document]:
        key = UUID(id)
        return next((d for d in app.state.documents if d.id == key), None)

    document_guard = RequireOwnership(Document)

    @app.get("/documents/{id}")
    async def get_document(id: str, disposition: Disposition = Depends(document_guard)):
        doc = find_document(id)
        if doc is None:
            return Response(status_code=404)
        return {"id": str(doc.id), "title": doc.title, "disposition": disposition.value}

    @app.put("/documents/{id}", dependencies=[Depends(document_guard)])
    async def put_document(id: str, payload: dict):
        doc = find_document(id)
        if doc is None:
            return Response(status_code=404)
        doc.title = payload.get("title", doc.title)
        return {"id": str(doc.id), "title": doc.title}

    @app.delete("/documents/{id}", dependencies=[Depends(document_guard)])
    async def delete_document(id: str):
        doc = find_document(id)
        if doc is None:
            return Response(status_code=404)
        app.state.documents.remove(doc)
        return Response(status_code=204)

    @app.get("/documents/{id}/raw", dependencies=[Depends(RequireOwnership(Document, route_param="document_id"))])
    async def get_document_raw(id: str):
        return {"id": id}

    @app.get("/notes/{id}", dependencies=[Depends(RequireOwnership(Note))])
    async def get_note(id: str):
        key = UUID(id)
        note = next((n for n in app.state.notes if n.id == key), None)
        return {"id": str(note.id), "title": note.title}

    @app.get("/unregistered/{id}", dependencies=[Depends(RequireOwnership(Unregistered))])
    async def get_unregistered(id: str):
        return {"id": id}

    router = APIRouter(prefix="/router/documents", dependencies=[Depends(RequireOwnership(Document))])

    @router.get("/{id}")
    async def router_get_document(id: str):
        return {"id": id}

    app.include_router(router)
    return app
