from fastapi import APIRouter, HTTPException
from loguru import logger

from kinmesh.domain.mesh import KinshipMesh
from kinmesh.domain.people import Person
from kinmesh.domain.relations import RelationKind, label_for
from kinmesh.kinship import group_by_surname
from kinmesh.search import KinshipSearchResult, KinshipSearchService


def _create_search_endpoint(service: KinshipSearchService):
    """Create the kinship search endpoint handler."""

    async def search(q: str = "") -> list[KinshipSearchResult]:
        try:
            return service.search(q)
        except Exception as e:
            logger.error(f"Error searching for '{q}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return search


def _create_mesh_endpoint(service: KinshipSearchService):
    """Create the memorial mesh endpoint handler."""

    async def get_mesh(memorial_id: str) -> KinshipMesh:
        try:
            return service.mesh_for(memorial_id)
        except KeyError as err:
            logger.warning(f"Memorial not found: {memorial_id}")
            raise HTTPException(status_code=404, detail="Memorial not found") from err
        except Exception as e:
            logger.error(f"Error building mesh for memorial {memorial_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_mesh


def _create_surnames_endpoint(service: KinshipSearchService):
    """Create the surname groups endpoint handler."""

    async def get_surname_groups(memorial_id: str) -> dict[str, list[Person]]:
        try:
            service.store.get_memorial(memorial_id)
            return group_by_surname(service.authors_for(memorial_id))
        except KeyError as err:
            logger.warning(f"Memorial not found: {memorial_id}")
            raise HTTPException(status_code=404, detail="Memorial not found") from err
        except Exception as e:
            logger.error(f"Error grouping surnames for memorial {memorial_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_surname_groups


def get_endpoints_router(*, service: KinshipSearchService) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/api/relations")
    async def list_relations():
        return [{"code": kind.value, "label": label_for(kind)} for kind in RelationKind]

    router.get("/api/search")(_create_search_endpoint(service))
    router.get("/api/memorials/{memorial_id}/mesh")(_create_mesh_endpoint(service))
    router.get("/api/memorials/{memorial_id}/surnames")(_create_surnames_endpoint(service))

    return router
