from __future__ import annotations
from typing import Dict, List, Optional

from todolist.domain.task_models import Task, TaskCreate, TaskUpdate

class InMemoryItemRepo:
    """
    Process-local store with the same interface as SQLiteItemRepo.
    Used for ITEMS_STORE=memory and in tests.
    """
    def __init__(self):
        self._items: Dict[int, Task] = {}
        self._next_id = 1

    async def create(self, data: TaskCreate) -> Task:
        item = Task(id=self._next_id, name=data.name, is_complete=data.is_complete)
        self._next_id += 1
        self._items[item.id] = item
        return item

    async def get(self, item_id: int) -> Optional[Task]:
        return self._items.get(item_id)

    async def list(self) -> List[Task]:
        return sorted(self._items.values(), key=lambda t: t.id)

    async def update(self, item_id: int, data: TaskUpdate) -> Optional[Task]:
        if item_id not in self._items:
            return None
        item = Task(id=item_id, name=data.name, is_complete=data.is_complete)
        self._items[item_id] = item
        return item

    async def delete(self, item_id: int) -> bool:
        return self._items.pop(item_id, None) is not None
