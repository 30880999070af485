"""Sharing pets with other users."""
import logging
import uuid
from typing import List

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.errors import ConflictError, NotFoundError, ValidationError
from petcare.models.pet import Pet
from petcare.models.shared_access import SharedAccess
from petcare.models.user import User
from petcare.schemas.pet_record import SharedAccessCreate
from petcare.services.access import get_accessible_pet, owned_pet_ids


logger = logging.getLogger(__name__)


class SharedAccessService:
    """
    Grants are managed by the pet's owner. A grantee may also remove their
    own grant.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_grants(self, user_id: uuid.UUID, pet_id: uuid.UUID) -> List[SharedAccess]:
        await get_accessible_pet(self.session, user_id, pet_id)
        result = await self.session.execute(
            select(SharedAccess)
            .where(SharedAccess.pet_id == pet_id)
            .order_by(SharedAccess.created_at)
        )
        return list(result.scalars().all())

    async def share_pet(
        self,
        owner_id: uuid.UUID,
        pet_id: uuid.UUID,
        data: SharedAccessCreate,
    ) -> SharedAccess:
        """
        Grant a registered user a role on a pet.

        Raises:
            NotFoundError: If the caller does not own the pet or the email is unknown
            ValidationError: If the owner tries to share with themselves
            ConflictError: If the user already has access
        """
        pet = await self.session.scalar(
            select(Pet).where(Pet.id == pet_id, Pet.user_id == owner_id)
        )
        if pet is None:
            raise NotFoundError("Pet not found")

        grantee = await self.session.scalar(
            select(User).where(func.lower(User.email) == data.email.lower())
        )
        if grantee is None:
            raise NotFoundError("User not found")
        if grantee.id == owner_id:
            raise ValidationError("Cannot share a pet with its owner", field="email")

        grant = SharedAccess(pet_id=pet_id, user_id=grantee.id, role=data.role)
        self.session.add(grant)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("Access already granted")

        await self.session.refresh(grant, ["user"])
        logger.info(f"Pet {pet_id} shared with user {grantee.id} as {data.role}")
        return grant

    async def revoke_access(
        self,
        user_id: uuid.UUID,
        pet_id: uuid.UUID,
        grantee_id: uuid.UUID,
    ) -> None:
        """
        Raises:
            NotFoundError: If no matching grant is removable by the caller
        """
        result = await self.session.execute(
            delete(SharedAccess)
            .where(
                SharedAccess.pet_id == pet_id,
                SharedAccess.user_id == grantee_id,
                or_(
                    SharedAccess.pet_id.in_(owned_pet_ids(user_id)),
                    SharedAccess.user_id == user_id,
                ),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Shared access not found")
        await self.session.commit()
        logger.info(f"Access to pet {pet_id} revoked for user {grantee_id}")
