from fastapi import APIRouter, Depends, HTTPException, Request, Response
from todolist.domain.task_models import Task, TaskCreate, TaskUpdate
from todolist.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["items"])


def get_service(request: Request) -> ItemService:
    # Wired per app in main.py: app.state.item_service = svc
    svc = getattr(request.app.state, "item_service", None)
    if svc is None:
        raise RuntimeError("ItemService not wired")
    return svc


@router.get("", response_model=list[Task])
async def list_items(svc: ItemService = Depends(get_service)):
    return await svc.list_items()


@router.post("", response_model=Task, status_code=201)
async def create_item(payload: TaskCreate, svc: ItemService = Depends(get_service)):
    return await svc.create_item(payload)


@router.get("/{item_id}", response_model=Task)
async def get_item(item_id: int, svc: ItemService = Depends(get_service)):
    item = await svc.get_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.put("/{item_id}", response_model=Task)
async def update_item(item_id: int, payload: TaskUpdate, svc: ItemService = Depends(get_service)):
    item = await svc.update_item(item_id, payload)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: int, svc: ItemService = Depends(get_service)):
    if not await svc.delete_item(item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    return Response(status_code=204)
