from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=140)
    is_complete: bool = Field(default=False, alias="isComplete")


class TaskUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=140)
    is_complete: bool = Field(alias="isComplete")


class Task(TaskCreate):
    id: int
