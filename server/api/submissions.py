# server/api/submissions.py

import logging
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import StreamingResponse

from server.api.auth import get_current_user
from server.core.export import content_disposition, export_filename, iter_submissions_csv
from server.core.validation import validate
from server.errors import InfrastructureError, ValidationError
from server.storage import Storage, get_storage


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/submissions", tags=["submissions"])

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SubmissionIn(BaseModel):
    """
    Request schema for a public assessment submission.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    company_code: str | None = None
    core_values: list[str] = Field(min_length=1)

    @field_validator("company_code")
    @classmethod
    def _blank_code_is_none(cls, v):
        return v or None


class Submission(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    email: str
    company_code: str | None = None
    core_values: list[str]
    created_at: datetime


def _serialize(submission) -> dict:
    return Submission.model_validate(submission).model_dump(by_alias=True, mode="json")


# -------------------------------
# Public
# -------------------------------

@router.post("", status_code=status.HTTP_201_CREATED)
def create_submission(payload: Any = Body(None), storage: Storage = Depends(get_storage)):
    result = validate(SubmissionIn, payload)
    if not result.ok:
        raise ValidationError("Invalid submission data", result.errors)

    data = result.value
    try:
        submission = storage.create_submission(data.name, data.email, data.company_code, data.core_values)
    except Exception as e:
        raise InfrastructureError("An error occurred while processing your submission") from e

    logger.info("Recorded submission id=%s company_code=%s", submission.id, submission.company_code)
    return {"message": "Submission recorded successfully", "data": _serialize(submission)}


# -------------------------------
# Authenticated
# -------------------------------

@router.get("", response_model=list[Submission], dependencies=[Depends(get_current_user)])
def list_submissions(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_submissions()
    except Exception as e:
        raise InfrastructureError("An error occurred while fetching submissions") from e


@router.get("/company-codes", response_model=list[str], dependencies=[Depends(get_current_user)])
def list_company_codes(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_unique_company_codes()
    except Exception as e:
        raise InfrastructureError("An error occurred while fetching company codes") from e


@router.get("/company/{company_code}", response_model=list[Submission], dependencies=[Depends(get_current_user)])
def list_submissions_by_company(company_code: str, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_submissions_by_company_code(company_code)
    except Exception as e:
        raise InfrastructureError("An error occurred while fetching submissions") from e


@router.get("/export", dependencies=[Depends(get_current_user)])
def export_submissions(
    company_code: str | None = Query(None, alias="companyCode"),
    storage: Storage = Depends(get_storage),
):
    """
    Streams submissions as a CSV attachment.
    `companyCode` filters by exact match; missing, empty or "all" exports everything.
    """
    code = company_code if company_code and company_code != "all" else None
    try:
        if code:
            submissions = storage.get_submissions_by_company_code(code)
        else:
            submissions = storage.get_all_submissions()
    except Exception as e:
        raise InfrastructureError("An error occurred while exporting submissions") from e

    logger.info("Exporting %d submissions (company_code=%s)", len(submissions), code)
    return StreamingResponse(
        iter_submissions_csv(submissions),
        media_type="text/csv",
        headers={"Content-Disposition": content_disposition(export_filename(code))},
    )
