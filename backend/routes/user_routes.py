import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import BaseModel

from backend.storage.user_gateway import UserGateway, get_user_gateway

router = APIRouter(tags=['users'])

_json_decoder = json.JSONDecoder()


class UserPayload(BaseModel):
    name: str = ''
    email: str = ''


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


def decode_user_payload(body: bytes) -> UserPayload:
    """Decode the first JSON value in ``body`` into a payload.

    Undecodable or non-object bodies become a blank payload, never a
    rejection. Anything after the first value is ignored. Keys match field
    names case-insensitively, later keys win, and non-string values leave
    the field as it was.
    """
    try:
        data, _ = _json_decoder.raw_decode(body.decode().lstrip())
    except ValueError:
        return UserPayload()

    if not isinstance(data, dict):
        return UserPayload()

    fields = {}
    for key, value in data.items():
        field = key.lower()
        if field in UserPayload.model_fields and isinstance(value, str):
            fields[field] = value

    return UserPayload(**fields)


async def read_user_payload(request: Request) -> UserPayload:
    return decode_user_payload(await request.body())


def empty_response() -> Response:
    return Response(status_code=200)


@router.get('', response_model=list[UserResponse])
def get_users(gateway: UserGateway = Depends(get_user_gateway)):
    return gateway.list_users()


@router.get('/{user_id}', response_model=UserResponse)
def get_user(user_id: str, gateway: UserGateway = Depends(get_user_gateway)):
    return gateway.get_user(user_id)


@router.post('', response_model=UserResponse)
def create_user(
    payload: UserPayload = Depends(read_user_payload),
    gateway: UserGateway = Depends(get_user_gateway),
):
    return gateway.create_user(payload.name, payload.email)


@router.put('/{user_id}')
def update_user(
    user_id: str,
    payload: UserPayload = Depends(read_user_payload),
    gateway: UserGateway = Depends(get_user_gateway),
):
    gateway.update_user(user_id, payload.name, payload.email)
    return empty_response()


@router.delete('/{user_id}')
def delete_user(user_id: str, gateway: UserGateway = Depends(get_user_gateway)):
    gateway.delete_user(user_id)
    return empty_response()
