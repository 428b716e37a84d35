from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from subscription_service.store import DataStore


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_actor(x_uid: Annotated[Optional[int], Header()] = None) -> int:
    """The acting user for audit rows. 0 when the caller is anonymous."""
    return x_uid or 0


StoreDep = Annotated[DataStore, Depends(get_store)]
ActorDep = Annotated[int, Depends(get_actor)]
