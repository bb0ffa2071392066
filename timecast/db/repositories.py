from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from timecast.db import models

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> ModelT:
        entity = self.model(**kwargs)
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: int) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def list(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        stmt = select(self.model).offset(offset).limit(limit)
        return self.db.execute(stmt).scalars().all()

    def update(self, entity: ModelT, **kwargs) -> ModelT:
        for key, value in kwargs.items():
            setattr(entity, key, value)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()


class WorkShiftRepository(BaseRepository[models.WorkShift]):
    model = models.WorkShift

    def list_starting_between(self, earliest: object, latest: object) -> list[models.WorkShift]:
        # Bounds go through the column's cast, so "7 am" and time(7) compare alike
        stmt = (
            select(models.WorkShift)
            .where(models.WorkShift.start_time >= earliest, models.WorkShift.start_time <= latest)
            .order_by(models.WorkShift.start_time)
        )
        return self.db.execute(stmt).scalars().all()
