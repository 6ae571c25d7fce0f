# server/api/leadership_values.py

import logging
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, Body, Depends, status

from server.api.auth import get_current_user
from server.core.validation import validate
from server.errors import InfrastructureError, NotFoundError, ValidationError
from server.storage import Storage, get_storage


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leadership-values", tags=["leadership-values"])


class LeadershipValueIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    value: str = Field(min_length=1)
    description: str = Field(min_length=1)


class LeadershipValue(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str
    description: str


def parse_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Invalid ID format")


def _validated(payload: Any) -> LeadershipValueIn:
    result = validate(LeadershipValueIn, payload)
    if not result.ok:
        raise ValidationError("Invalid leadership value data", result.errors)
    return result.value


def _get_or_404(storage: Storage, value_id: int):
    try:
        item = storage.get_leadership_value_by_id(value_id)
    except Exception as e:
        raise InfrastructureError("An error occurred while fetching the leadership value") from e
    if item is None:
        raise NotFoundError("Leadership value not found")
    return item


# -------------------------------
# Public
# -------------------------------

@router.get("", response_model=list[LeadershipValue])
def list_leadership_values(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_leadership_values()
    except Exception as e:
        raise InfrastructureError("An error occurred while fetching leadership values") from e


# -------------------------------
# Authenticated
# -------------------------------

@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
def create_leadership_value(payload: Any = Body(None), storage: Storage = Depends(get_storage)):
    data = _validated(payload)
    try:
        item = storage.create_leadership_value(data.value, data.description)
    except Exception as e:
        raise InfrastructureError("An error occurred while creating the leadership value") from e
    logger.info("Created leadership value id=%s", item.id)
    return {
        "message": "Leadership value created successfully",
        "data": LeadershipValue.model_validate(item).model_dump(),
    }


@router.get("/{value_id}", response_model=LeadershipValue, dependencies=[Depends(get_current_user)])
def get_leadership_value(value_id: str, storage: Storage = Depends(get_storage)):
    return _get_or_404(storage, parse_id(value_id))


@router.put("/{value_id}", dependencies=[Depends(get_current_user)])
def update_leadership_value(value_id: str, payload: Any = Body(None), storage: Storage = Depends(get_storage)):
    item_id = parse_id(value_id)
    _get_or_404(storage, item_id)
    data = _validated(payload)
    try:
        item = storage.update_leadership_value(item_id, data.value, data.description)
    except Exception as e:
        raise InfrastructureError("An error occurred while updating the leadership value") from e
    if item is None:
        raise NotFoundError("Leadership value not found")
    return {
        "message": "Leadership value updated successfully",
        "data": LeadershipValue.model_validate(item).model_dump(),
    }


@router.delete("/{value_id}", dependencies=[Depends(get_current_user)])
def delete_leadership_value(value_id: str, storage: Storage = Depends(get_storage)):
    item_id = parse_id(value_id)
    _get_or_404(storage, item_id)
    try:
        deleted = storage.delete_leadership_value(item_id)
    except Exception as e:
        raise InfrastructureError("An error occurred while deleting the leadership value") from e
    if not deleted:
        raise NotFoundError("Leadership value not found")
    logger.info("Deleted leadership value id=%s", item_id)
    return {"message": "Leadership value deleted successfully"}
