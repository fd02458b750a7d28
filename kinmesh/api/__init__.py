from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kinmesh.api.endpoints import get_endpoints_router
from kinmesh.config import settings
from kinmesh.domain.relations import RelationKind
from kinmesh.memorial_store import MemorialStore
from kinmesh.search import KinshipSearchService


def create_app(*, store: MemorialStore) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    service = KinshipSearchService(
        store,
        default_relation=RelationKind(settings.default_relation),
        limit=settings.search_limit,
    )
    app.include_router(router=get_endpoints_router(service=service))

    return app
