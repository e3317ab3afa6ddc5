from __future__ import annotations
from typing import Optional, List

from sqlalchemy import Boolean, Integer, String, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from todolist.domain.task_models import Task, TaskCreate, TaskUpdate


class Base(DeclarativeBase):
    pass


class ItemRow(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(140), nullable=False)
    is_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_domain(self) -> Task:
        return Task(id=self.id, name=self.name, is_complete=self.is_complete)


class SQLiteItemRepo:
    def __init__(self, sessionmaker):
        self.sessionmaker = sessionmaker

    async def create(self, data: TaskCreate) -> Task:
        row = ItemRow(name=data.name, is_complete=data.is_complete)
        async with self.sessionmaker() as session:
            session.add(row)
            await session.commit()
            return row.to_domain()

    async def get(self, item_id: int) -> Optional[Task]:
        async with self.sessionmaker() as session:
            row = await session.get(ItemRow, item_id)
            return row.to_domain() if row else None

    async def list(self) -> List[Task]:
        async with self.sessionmaker() as session:
            res = await session.execute(select(ItemRow).order_by(ItemRow.id))
            return [r.to_domain() for r in res.scalars().all()]

    async def update(self, item_id: int, data: TaskUpdate) -> Optional[Task]:
        async with self.sessionmaker() as session:
            row = await session.get(ItemRow, item_id)
            if row is None:
                return None
            row.name = data.name
            row.is_complete = data.is_complete
            await session.commit()
            return row.to_domain()

    async def delete(self, item_id: int) -> bool:
        async with self.sessionmaker() as session:
            row = await session.get(ItemRow, item_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True
