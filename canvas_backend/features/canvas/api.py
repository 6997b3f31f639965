from typing import Any

from fastapi import APIRouter, Body, Request

from canvas_backend.features.canvas.service import CanvasService

router = APIRouter(prefix="/canvas", tags=["canvas"])


@router.post("", status_code=201)
def create_canvas(request: Request, body: Any = Body(...)) -> dict[str, Any]:
    return CanvasService(store=request.app.state.canvases).create(body=body)


@router.get("")
def list_canvases(request: Request) -> list[dict[str, Any]]:
    return CanvasService(store=request.app.state.canvases).list_all()


@router.get("/{canvas_id}")
def get_canvas(request: Request, canvas_id: str) -> dict[str, Any]:
    return CanvasService(store=request.app.state.canvases).get(canvas_id=canvas_id)
