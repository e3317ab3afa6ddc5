import logging
from typing import List, Optional
from todolist.domain.task_models import Task, TaskCreate, TaskUpdate

logger = logging.getLogger("todolist.items")

class ItemService:
    def __init__(self, repo):
        self.repo = repo

    async def create_item(self, data: TaskCreate) -> Task:
        item = await self.repo.create(data)
        logger.info("item.create", extra={"category": "items", "event": "item.create", "item_id": item.id, "item_name": item.name})
        return item

    async def get_item(self, item_id: int) -> Optional[Task]:
        return await self.repo.get(item_id)

    async def list_items(self) -> List[Task]:
        return await self.repo.list()

    async def update_item(self, item_id: int, data: TaskUpdate) -> Optional[Task]:
        item = await self.repo.update(item_id, data)
        if item:
            logger.info(
                "item.update",
                extra={"category": "items", "event": "item.update", "item_id": item_id, "is_complete": item.is_complete},
            )
        return item

    async def delete_item(self, item_id: int) -> bool:
        deleted = await self.repo.delete(item_id)
        if deleted:
            logger.info("item.delete", extra={"category": "items", "event": "item.delete", "item_id": item_id})
        return deleted
