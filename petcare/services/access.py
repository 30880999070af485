"""
Pet access predicates.

A user can reach a pet they own or one shared with them. Every query and
conditional write that touches user data is filtered through these
clauses, so missing and foreign records are indistinguishable to callers.
"""
import uuid
from typing import Sequence

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.errors import NotFoundError
from petcare.models.enums import AccessRole
from petcare.models.pet import Pet
from petcare.models.shared_access import SharedAccess


READ_ROLES = (AccessRole.OWNER, AccessRole.CAREGIVER, AccessRole.VIEWER)
# Roles allowed to manage tasks, completions and records
WRITE_ROLES = (AccessRole.OWNER, AccessRole.CAREGIVER)
# Roles allowed to edit the pet itself
EDIT_ROLES = (AccessRole.OWNER,)


def pet_access_clause(user_id: uuid.UUID, roles: Sequence[AccessRole] = READ_ROLES):
    """WHERE clause matching pets the user owns or holds one of ``roles`` on."""
    shared = select(SharedAccess.pet_id).where(
        SharedAccess.user_id == user_id,
        SharedAccess.role.in_([role.value for role in roles]),
    )
    return or_(Pet.user_id == user_id, Pet.id.in_(shared))


def accessible_pet_ids(
    user_id: uuid.UUID,
    roles: Sequence[AccessRole] = READ_ROLES,
) -> Select:
    return select(Pet.id).where(pet_access_clause(user_id, roles))


def owned_pet_ids(user_id: uuid.UUID) -> Select:
    return select(Pet.id).where(Pet.user_id == user_id)


async def get_accessible_pet(
    session: AsyncSession,
    user_id: uuid.UUID,
    pet_id: uuid.UUID,
    roles: Sequence[AccessRole] = READ_ROLES,
) -> Pet:
    """
    Load a pet the user may act on with one of ``roles``.

    Raises:
        NotFoundError: If the pet does not exist or is not accessible
    """
    stmt = (
        select(Pet)
        .where(Pet.id == pet_id, pet_access_clause(user_id, roles))
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    pet = result.scalar_one_or_none()
    if pet is None:
        raise NotFoundError("Pet not found")
    return pet
