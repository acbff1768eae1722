"""Batch control endpoint."""

from fastapi import APIRouter, HTTPException

from ..errors import UnknownBatchTargetError
from ..models import BatchRequest, BatchResult
from ..state import get_state

router = APIRouter()


@router.get("/targets")
def list_targets():
    return {"targets": get_state().batch.targets}


@router.post("/run", response_model=BatchResult)
def run_batch(request: BatchRequest):
    state = get_state()
    try:
        return state.batch.run_batch(request)
    except UnknownBatchTargetError as e:
        raise HTTPException(status_code=400, detail=str(e))
