"""Pet profile operations scoped to the calling user."""
import logging
import uuid
from typing import Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import utcnow
from petcare.errors import NotFoundError
from petcare.models.enums import AccessRole
from petcare.models.pet import Pet
from petcare.models.pet_record import PET_RECORD_MODELS
from petcare.models.shared_access import SharedAccess
from petcare.models.task import Task
from petcare.models.task_extras import TaskAttachment, TaskComment
from petcare.models.task_log import TaskLog
from petcare.schemas.pet import PetCreate, PetRead, PetUpdate
from petcare.services.access import EDIT_ROLES, pet_access_clause


logger = logging.getLogger(__name__)


class PetService:
    """
    CRUD over pets.

    Reads return owned pets plus pets shared with the user, each tagged
    with the role the caller holds. Updates and deletes are single
    conditional statements so ownership is checked in the same statement
    that changes the row.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _shared_roles(self, user_id: uuid.UUID) -> Dict[uuid.UUID, str]:
        result = await self.session.execute(
            select(SharedAccess.pet_id, SharedAccess.role).where(
                SharedAccess.user_id == user_id
            )
        )
        return {pet_id: role for pet_id, role in result.all()}

    @staticmethod
    def _to_read(pet: Pet, user_id: uuid.UUID, shared_roles: Dict[uuid.UUID, str]) -> PetRead:
        pet_read = PetRead.model_validate(pet)
        if pet.user_id != user_id:
            pet_read.access_role = shared_roles.get(pet.id, AccessRole.VIEWER.value)
        return pet_read

    async def list_pets(self, user_id: uuid.UUID) -> List[PetRead]:
        """Pets visible to the user, newest first."""
        result = await self.session.execute(
            select(Pet)
            .where(pet_access_clause(user_id))
            .order_by(Pet.created_at.desc())
        )
        pets = result.scalars().all()
        shared_roles = await self._shared_roles(user_id)
        return [self._to_read(pet, user_id, shared_roles) for pet in pets]

    async def get_pet(self, user_id: uuid.UUID, pet_id: uuid.UUID) -> PetRead:
        """
        Raises:
            NotFoundError: If the pet is missing or not visible to the user
        """
        result = await self.session.execute(
            select(Pet)
            .where(Pet.id == pet_id, pet_access_clause(user_id))
            .execution_options(populate_existing=True)
        )
        pet = result.scalar_one_or_none()
        if pet is None:
            raise NotFoundError("Pet not found")
        return self._to_read(pet, user_id, await self._shared_roles(user_id))

    async def create_pet(self, user_id: uuid.UUID, data: PetCreate) -> PetRead:
        pet = Pet(user_id=user_id, **data.model_dump())
        self.session.add(pet)
        await self.session.commit()
        logger.info(f"Pet {pet.id} created for user {user_id}")
        return PetRead.model_validate(pet)

    async def update_pet(
        self,
        user_id: uuid.UUID,
        pet_id: uuid.UUID,
        data: PetUpdate,
    ) -> PetRead:
        """
        Apply the supplied fields only.

        Raises:
            NotFoundError: If no pet matched both the id and the caller's access
        """
        values = data.model_dump(exclude_unset=True)
        values["updated_at"] = utcnow()
        stmt = (
            update(Pet)
            .where(Pet.id == pet_id, pet_access_clause(user_id, EDIT_ROLES))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("Pet not found")
        await self.session.commit()
        return await self.get_pet(user_id, pet_id)

    async def delete_pet(self, user_id: uuid.UUID, pet_id: uuid.UUID) -> None:
        """
        Delete a pet together with its tasks, logs, records and grants.

        Only the owner may delete. Everything goes in one transaction;
        nothing is removed when the pet is not the caller's.

        Raises:
            NotFoundError: If the user owns no pet with this id
        """
        owned = select(Pet.id).where(Pet.id == pet_id, Pet.user_id == user_id)
        task_ids = select(Task.id).where(Task.pet_id.in_(owned))
        statements = [
            delete(TaskLog).where(TaskLog.pet_id.in_(owned)),
            delete(TaskAttachment).where(TaskAttachment.task_id.in_(task_ids)),
            delete(TaskComment).where(TaskComment.task_id.in_(task_ids)),
            delete(Task).where(Task.pet_id.in_(owned)),
        ]
        statements.extend(
            delete(model).where(model.pet_id.in_(owned)) for model in PET_RECORD_MODELS
        )
        statements.append(delete(SharedAccess).where(SharedAccess.pet_id.in_(owned)))

        try:
            for stmt in statements:
                await self.session.execute(
                    stmt.execution_options(synchronize_session=False)
                )
            result = await self.session.execute(
                delete(Pet)
                .where(Pet.id == pet_id, Pet.user_id == user_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Pet not found")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Pet {pet_id} deleted by user {user_id}")
