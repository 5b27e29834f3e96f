from fastapi import APIRouter, Depends, HTTPException

from getres_lens.api.dependencies import get_context
from getres_lens.api.schemas import PathResponse, RefreshResponse
from getres_lens.core.context import LensContext
from getres_lens.core.paths import format_path, resolve_path
from getres_lens.core.tree import build_forest
from getres_lens.errors import RefreshError
from getres_lens.models import Resource, TreeNode

router = APIRouter(tags=["resources"])


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(lens: LensContext = Depends(get_context)) -> RefreshResponse:
    try:
        records = await lens.store.refresh()
    except RefreshError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return RefreshResponse(records=len(records), generation=lens.store.generation)


@router.get("/resources", response_model=list[Resource])
async def resources(lens: LensContext = Depends(get_context)) -> list[Resource]:
    return list(lens.store.current_snapshot())


@router.get("/resources/tree", response_model=list[TreeNode])
async def resource_tree(lens: LensContext = Depends(get_context)) -> list[TreeNode]:
    return build_forest(lens.store.current_snapshot())


@router.get("/resources/{resource_id}/path", response_model=PathResponse)
async def resource_path(resource_id: str, lens: LensContext = Depends(get_context)) -> PathResponse:
    resource = lens.store.lookup_by_id(resource_id)
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Unknown resource id: {resource_id}")
    names = resolve_path(resource, lens.store.snapshot.by_id)
    return PathResponse(id=resource.key, names=names, path=format_path(names))
