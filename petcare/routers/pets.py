"""
Pets router.

CRUD over the caller's pets plus pets shared with them, and the per-pet
history records and sharing grants nested under ``/api/pets/{pet_id}``.
"""
import uuid
from typing import List, Type

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.models.pet_record import (
    PetAchievement,
    PetMilestone,
    PetMoodLog,
    PetPhoto,
    PetWeightLog,
)
from petcare.models.shared_access import SharedAccess
from petcare.models.user import User
from petcare.schemas.pet import PetCreate, PetRead, PetUpdate
from petcare.schemas.pet_record import (
    PetAchievementCreate,
    PetAchievementRead,
    PetMilestoneCreate,
    PetMilestoneRead,
    PetMoodLogCreate,
    PetMoodLogRead,
    PetPhotoCreate,
    PetPhotoRead,
    PetWeightLogCreate,
    PetWeightLogRead,
    SharedAccessCreate,
    SharedAccessRead,
)
from petcare.services.pet_record_service import PetRecordService
from petcare.services.pet_service import PetService
from petcare.services.shared_access_service import SharedAccessService


router = APIRouter(
    prefix="/api/pets",
    tags=["pets"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Pet not found"},
    }
)


@router.get("", response_model=List[PetRead])
async def list_pets(
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[PetRead]:
    """
    List pets owned by or shared with the authenticated user, newest first.

    Each pet carries ``accessRole``: ``owner`` for the caller's own pets,
    otherwise the role granted to them.
    """
    return await PetService(session).list_pets(user.id)


@router.post("", response_model=PetRead, status_code=status.HTTP_201_CREATED)
async def create_pet(
    pet_data: PetCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> PetRead:
    """
    Create a pet owned by the authenticated user.

    **Required fields:**
    - name: Pet's name
    - type: dog, cat, bird, fish or other

    **Example:**
    ```json
    {"name": "Rex", "type": "dog", "breed": "Beagle", "age": 3}
    ```
    """
    return await PetService(session).create_pet(user.id, pet_data)


@router.get("/{pet_id}", response_model=PetRead)
async def get_pet(
    pet_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> PetRead:
    return await PetService(session).get_pet(user.id, pet_id)


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet(
    pet_id: uuid.UUID,
    pet_data: PetUpdate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> PetRead:
    """
    Update a pet. Only the fields present in the body change.

    Allowed for the owner and for users granted the ``owner`` role.
    """
    return await PetService(session).update_pet(user.id, pet_id, pet_data)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(
    pet_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    """
    Delete a pet with all of its tasks, task logs, records and grants.

    Only the pet's owner may delete it.
    """
    await PetService(session).delete_pet(user.id, pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sharing

@router.get("/{pet_id}/shared", response_model=List[SharedAccessRead])
async def list_shared_access(
    pet_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[SharedAccess]:
    return await SharedAccessService(session).list_grants(user.id, pet_id)


@router.post(
    "/{pet_id}/shared",
    response_model=SharedAccessRead,
    status_code=status.HTTP_201_CREATED,
)
async def share_pet(
    pet_id: uuid.UUID,
    data: SharedAccessCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> SharedAccess:
    """
    Share a pet with another registered user by email.

    Roles: ``viewer`` (read only), ``caregiver`` (manage tasks and records),
    ``owner`` (also edit the pet).
    """
    return await SharedAccessService(session).share_pet(user.id, pet_id, data)


@router.delete("/{pet_id}/shared/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_shared_access(
    pet_id: uuid.UUID,
    user_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    await SharedAccessService(session).revoke_access(user.id, pet_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# History records

def _add_record_routes(
    path: str,
    model: Type,
    create_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
) -> None:
    """Register list, create and delete endpoints for one kind of pet record."""

    async def list_records(
        pet_id: uuid.UUID,
        user: User = Depends(current_active_user),
        session: AsyncSession = Depends(get_async_session),
    ):
        return await PetRecordService(session, model).list_records(user.id, pet_id)

    async def create_record(
        pet_id: uuid.UUID,
        data: create_schema,
        user: User = Depends(current_active_user),
        session: AsyncSession = Depends(get_async_session),
    ):
        return await PetRecordService(session, model).create_record(user.id, pet_id, data)

    async def delete_record(
        pet_id: uuid.UUID,
        record_id: uuid.UUID,
        user: User = Depends(current_active_user),
        session: AsyncSession = Depends(get_async_session),
    ) -> Response:
        await PetRecordService(session, model).delete_record(user.id, pet_id, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.add_api_route(
        f"/{{pet_id}}/{path}",
        list_records,
        methods=["GET"],
        response_model=List[read_schema],
        name=f"list_{path}",
    )
    router.add_api_route(
        f"/{{pet_id}}/{path}",
        create_record,
        methods=["POST"],
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{path}",
    )
    router.add_api_route(
        f"/{{pet_id}}/{path}/{{record_id}}",
        delete_record,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{path}",
    )


_add_record_routes("photos", PetPhoto, PetPhotoCreate, PetPhotoRead)
_add_record_routes("milestones", PetMilestone, PetMilestoneCreate, PetMilestoneRead)
_add_record_routes("weight", PetWeightLog, PetWeightLogCreate, PetWeightLogRead)
_add_record_routes("mood", PetMoodLog, PetMoodLogCreate, PetMoodLogRead)
_add_record_routes("achievements", PetAchievement, PetAchievementCreate, PetAchievementRead)
