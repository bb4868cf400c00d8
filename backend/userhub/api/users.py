"""CRUD endpoints for users, served from the record store."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from userhub.api._errors import to_http_error
from userhub.deps import get_user_service
from userhub.domain.users.exceptions import UserError
from userhub.domain.users.service import UserService
from userhub.schemas import dto

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/save", response_model=dto.UserResponse)
async def save_user_endpoint(
	payload: dto.UserRequest,
	service: UserService = Depends(get_user_service),
) -> dto.UserResponse:
	user = await service.save(payload.to_user())
	return dto.UserResponse.from_user(user)


@router.put("/update/{user_id}", response_model=dto.UserResponse)
async def update_user_endpoint(
	user_id: int,
	payload: dto.UserRequest,
	service: UserService = Depends(get_user_service),
) -> dto.UserResponse:
	try:
		user = await service.update(user_id, payload.to_user())
	except UserError as exc:
		raise to_http_error(exc) from exc
	return dto.UserResponse.from_user(user)


@router.get("/findOne/{user_id}", response_model=dto.UserResponse)
async def find_one_endpoint(
	user_id: int,
	service: UserService = Depends(get_user_service),
) -> dto.UserResponse:
	try:
		user = await service.find_one(user_id)
	except UserError as exc:
		raise to_http_error(exc) from exc
	return dto.UserResponse.from_user(user)


@router.get("/all", response_model=List[dto.UserResponse])
async def find_all_endpoint(service: UserService = Depends(get_user_service)) -> List[dto.UserResponse]:
	return [dto.UserResponse.from_user(user) for user in await service.find_all()]


@router.get("/findByName/{name}", response_model=List[dto.UserResponse])
async def find_by_name_endpoint(
	name: str,
	service: UserService = Depends(get_user_service),
) -> List[dto.UserResponse]:
	return [dto.UserResponse.from_user(user) for user in await service.find_by_name(name)]


@router.delete("/delete/{user_id}")
async def delete_user_endpoint(
	user_id: int,
	service: UserService = Depends(get_user_service),
) -> None:
	await service.delete(user_id)
