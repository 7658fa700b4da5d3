"""
Catalog API endpoints.

Every catalog kind exposes the same operations, so routers are built by
two factories: one for aggregate root kinds and one for nested kinds.
"""

from operator import attrgetter
from typing import Type

from fastapi import APIRouter, Depends

from core.error_handlers import create_not_found_exception, handle_service_exceptions, raise_for_result
from models.base import Movable
from models.result import Result
from services.catalog import Catalog
from services.child_facade import ChildFacade
from services.parent_facade import ParentFacade
from .dependencies import get_catalog


def create_parent_router(
    prefix: str,
    tag: str,
    facade_name: str,
    entity_class: Type[Movable],
) -> APIRouter:
    """
    Create router for an aggregate root kind.

    Args:
        prefix: URL prefix, e.g. "/movies"
        tag: OpenAPI tag
        facade_name: Attribute of Catalog holding the facade
        entity_class: Request body model

    Returns:
        Configured router
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    kind = entity_class.__name__
    select_facade = attrgetter(facade_name)

    def get_facade(catalog: Catalog = Depends(get_catalog)) -> ParentFacade:
        return select_facade(catalog)

    @router.get("/", response_model=Result, summary=f"List all {tag}")
    @handle_service_exceptions(f"list {tag}")
    async def get_all_endpoint(facade: ParentFacade = Depends(get_facade)) -> Result:
        """Return every entity in presentation order."""
        return await facade.get_all()

    @router.get("/{entity_id}", response_model=Result, summary=f"Get {kind} by ID")
    @handle_service_exceptions(f"get {kind}")
    async def get_endpoint(entity_id: int, facade: ParentFacade = Depends(get_facade)) -> Result:
        result = raise_for_result(await facade.get(entity_id))
        if result.data is None:
            raise create_not_found_exception(kind, entity_id)
        return result

    @router.post("/add", response_model=Result, summary=f"Add {kind}")
    @handle_service_exceptions(f"add {kind}")
    async def add_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.add(data))

    @router.post("/update", response_model=Result, summary=f"Update {kind}")
    @handle_service_exceptions(f"update {kind}")
    async def update_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.update(data))

    @router.post("/remove", response_model=Result, summary=f"Remove {kind}")
    @handle_service_exceptions(f"remove {kind}")
    async def remove_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.remove(data))

    @router.post("/duplicate", response_model=Result, summary=f"Duplicate {kind}")
    @handle_service_exceptions(f"duplicate {kind}")
    async def duplicate_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.duplicate(data))

    @router.post("/moveUp", response_model=Result, summary=f"Move {kind} up")
    @handle_service_exceptions(f"move {kind} up")
    async def move_up_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.move_up(data))

    @router.post("/moveDown", response_model=Result, summary=f"Move {kind} down")
    @handle_service_exceptions(f"move {kind} down")
    async def move_down_endpoint(data: entity_class, facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.move_down(data))

    @router.post("/updatePositions", response_model=Result, summary=f"Compact positions of {tag}")
    @handle_service_exceptions(f"update positions of {tag}")
    async def update_positions_endpoint(facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.update_positions())

    @router.post("/new", response_model=Result, summary=f"Remove all {tag}")
    @handle_service_exceptions(f"remove all {tag}")
    async def new_data_endpoint(facade: ParentFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.new_data())

    return router


def create_child_router(
    prefix: str,
    parent_prefix: str,
    tag: str,
    facade_name: str,
    entity_class: Type[Movable],
    parent_class: Type[Movable],
) -> APIRouter:
    """
    Create router for a nested kind.

    Listing and adding need the parent and live under the parent's URL;
    the other operations locate the child by its own ID.

    Args:
        prefix: URL prefix of the children, e.g. "/seasons"
        parent_prefix: URL prefix of the parent kind, e.g. "/shows"
        tag: OpenAPI tag
        facade_name: Attribute of Catalog holding the facade
        entity_class: Request body model
        parent_class: Model of the parent kind

    Returns:
        Configured router
    """
    router = APIRouter(tags=[tag])
    kind = entity_class.__name__
    select_facade = attrgetter(facade_name)
    nested_prefix = f"{parent_prefix}/{{parent_id}}{prefix}"

    def get_facade(catalog: Catalog = Depends(get_catalog)) -> ChildFacade:
        return select_facade(catalog)

    @router.get(nested_prefix, response_model=Result, summary=f"List {tag} of parent")
    @handle_service_exceptions(f"list {tag}")
    async def find_endpoint(parent_id: int, facade: ChildFacade = Depends(get_facade)) -> Result:
        """Return children of the parent in presentation order."""
        return raise_for_result(await facade.find(parent_class(id=parent_id)))

    @router.post(f"{nested_prefix}/add", response_model=Result, summary=f"Add {kind} to parent")
    @handle_service_exceptions(f"add {kind}")
    async def add_endpoint(
        parent_id: int, data: entity_class, facade: ChildFacade = Depends(get_facade)
    ) -> Result:
        return raise_for_result(await facade.add(parent_class(id=parent_id), data))

    @router.get(f"{prefix}/{{entity_id}}", response_model=Result, summary=f"Get {kind} by ID")
    @handle_service_exceptions(f"get {kind}")
    async def get_endpoint(entity_id: int, facade: ChildFacade = Depends(get_facade)) -> Result:
        result = raise_for_result(await facade.get(entity_id))
        if result.data is None:
            raise create_not_found_exception(kind, entity_id)
        return result

    @router.post(f"{prefix}/update", response_model=Result, summary=f"Update {kind}")
    @handle_service_exceptions(f"update {kind}")
    async def update_endpoint(data: entity_class, facade: ChildFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.update(data))

    @router.post(f"{prefix}/remove", response_model=Result, summary=f"Remove {kind}")
    @handle_service_exceptions(f"remove {kind}")
    async def remove_endpoint(data: entity_class, facade: ChildFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.remove(data))

    @router.post(f"{prefix}/duplicate", response_model=Result, summary=f"Duplicate {kind}")
    @handle_service_exceptions(f"duplicate {kind}")
    async def duplicate_endpoint(data: entity_class, facade: ChildFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.duplicate(data))

    @router.post(f"{prefix}/moveUp", response_model=Result, summary=f"Move {kind} up")
    @handle_service_exceptions(f"move {kind} up")
    async def move_up_endpoint(data: entity_class, facade: ChildFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.move_up(data))

    @router.post(f"{prefix}/moveDown", response_model=Result, summary=f"Move {kind} down")
    @handle_service_exceptions(f"move {kind} down")
    async def move_down_endpoint(data: entity_class, facade: ChildFacade = Depends(get_facade)) -> Result:
        return raise_for_result(await facade.move_down(data))

    return router
