from fastapi import APIRouter, Depends

from getres_lens.api.dependencies import get_context
from getres_lens.api.schemas import PositionRequest, ScanRequest
from getres_lens.core.context import LensContext
from getres_lens.models import CompletionItem, HoverPayload, ScanResult

router = APIRouter(tags=["lens"])


@router.post("/scan", response_model=ScanResult)
async def scan(body: ScanRequest, lens: LensContext = Depends(get_context)) -> ScanResult:
    result = lens.handle_document_change(body.to_document(), body.cursor)
    return result or ScanResult()


@router.post("/hover", response_model=HoverPayload | None)
async def hover(body: PositionRequest, lens: LensContext = Depends(get_context)) -> HoverPayload | None:
    return lens.hover(body.to_document(), body.position)


@router.post("/completions", response_model=list[CompletionItem])
async def completions(body: PositionRequest, lens: LensContext = Depends(get_context)) -> list[CompletionItem]:
    return lens.complete(body.to_document(), body.position) or []
