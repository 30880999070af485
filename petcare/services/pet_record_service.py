"""
History records attached to a pet.

Photos, milestones, weight logs, mood logs and achievements share the same
lifecycle, so one service handles them all, parameterized by model.
"""
import logging
import uuid
from typing import List, Type

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.errors import NotFoundError
from petcare.models.pet_record import PetWeightLog
from petcare.services.access import (
    READ_ROLES,
    WRITE_ROLES,
    accessible_pet_ids,
    get_accessible_pet,
)


logger = logging.getLogger(__name__)


class PetRecordService:
    def __init__(self, session: AsyncSession, model: Type):
        self.session = session
        self.model = model

    async def list_records(self, user_id: uuid.UUID, pet_id: uuid.UUID) -> List:
        """
        Records of one pet, newest first.

        Raises:
            NotFoundError: If the pet is not visible to the user
        """
        await get_accessible_pet(self.session, user_id, pet_id, READ_ROLES)
        result = await self.session.execute(
            select(self.model)
            .where(self.model.pet_id == pet_id)
            .order_by(self.model.recorded_at.desc())
        )
        return list(result.scalars().all())

    async def create_record(
        self,
        user_id: uuid.UUID,
        pet_id: uuid.UUID,
        data: BaseModel,
    ):
        """
        Add a record. A weight log also becomes the pet's current weight.

        Raises:
            NotFoundError: If the pet is not writable by the user
        """
        pet = await get_accessible_pet(self.session, user_id, pet_id, WRITE_ROLES)
        record = self.model(pet_id=pet_id, **data.model_dump())
        self.session.add(record)
        if self.model is PetWeightLog:
            pet.weight = record.weight
        await self.session.commit()
        logger.info(f"{self.model.__name__} {record.id} added to pet {pet_id}")
        return record

    async def delete_record(
        self,
        user_id: uuid.UUID,
        pet_id: uuid.UUID,
        record_id: uuid.UUID,
    ) -> None:
        """
        Raises:
            NotFoundError: If no such record exists on a pet writable by the user
        """
        result = await self.session.execute(
            delete(self.model)
            .where(
                self.model.id == record_id,
                self.model.pet_id == pet_id,
                self.model.pet_id.in_(accessible_pet_ids(user_id, WRITE_ROLES)),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Record not found")
        await self.session.commit()
