"""Static pet care tips."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.models.notification import PetCareTip


async def list_care_tips(
    session: AsyncSession,
    pet_type: Optional[str] = None,
    category: Optional[str] = None,
) -> List[PetCareTip]:
    """Tips for every pet type unless filtered; ``general`` tips always match a pet type."""
    stmt = select(PetCareTip)
    if pet_type is not None:
        stmt = stmt.where(PetCareTip.pet_type.in_([pet_type, "general"]))
    if category is not None:
        stmt = stmt.where(PetCareTip.category == category)
    stmt = stmt.order_by(PetCareTip.pet_type, PetCareTip.category, PetCareTip.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())
