"""User API routes."""

from fastapi import APIRouter, Depends
from userbio.models.user import User, UserCreate, UserUpdate
from userbio.services.user_service import UserRecordService
from userbio_api.models.messages import ErrorResponse, MessageResponse
from userbio_api.services import get_user_service

router = APIRouter(tags=["users"])

NOT_FOUND = {404: {"model": MessageResponse}}
CLIENT_ERROR = {400: {"model": ErrorResponse}}
INTERNAL_ERROR = {500: {"model": ErrorResponse}}


@router.post("/user", response_model=User, responses={**CLIENT_ERROR, **INTERNAL_ERROR})
async def create_user(payload: UserCreate, service: UserRecordService = Depends(get_user_service)) -> User:
    return await service.create_user(payload)


@router.get("/users", response_model=list[User], responses=INTERNAL_ERROR)
def get_all_users(service: UserRecordService = Depends(get_user_service)) -> list[User]:
    return service.list_users()


@router.get("/user/{user_id}", response_model=User, responses={**NOT_FOUND, **INTERNAL_ERROR})
def get_user_by_id(user_id: str, service: UserRecordService = Depends(get_user_service)) -> User:
    return service.get_user(user_id)


@router.put(
    "/update/user/{user_id}",
    response_model=User,
    responses={**CLIENT_ERROR, **NOT_FOUND, **INTERNAL_ERROR},
)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    service: UserRecordService = Depends(get_user_service),
) -> User:
    return await service.update_user(user_id, payload)


@router.delete("/delete/user/{user_id}", response_model=MessageResponse, responses={**NOT_FOUND, **INTERNAL_ERROR})
def delete_user(user_id: str, service: UserRecordService = Depends(get_user_service)) -> MessageResponse:
    service.delete_user(user_id)
    return MessageResponse(message="User Deleted Successfully")
