from fastapi import APIRouter

from ..deps import StoreDep

router = APIRouter(tags=["utilities"])


@router.get("/healthCheck")
async def health_check(store: StoreDep):
    """Check whether or not the services are healthy."""
    return await store.check_connections()
