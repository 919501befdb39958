"""Rarest-items endpoint."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from rarest.bootstrap import get_container
from rarest.core import ProfileFormatError
from rarest.data import CorpusUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()


class ProfileRequest(BaseModel):
    """GetProfile response body (components 800 and 900) or its envelope.

    Component keys are accepted in camelCase or PascalCase and forwarded in
    camelCase.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    profile_collectibles: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("profileCollectibles", "ProfileCollectibles", "profile_collectibles"),
        serialization_alias="profileCollectibles",
        description="ProfileCollectibles component",
    )
    profile_records: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("profileRecords", "ProfileRecords", "profile_records"),
        serialization_alias="profileRecords",
        description="ProfileRecords component",
    )
    response: dict[str, Any] | None = Field(
        default=None, alias="Response", description="Unwrapped Bungie envelope"
    )


@router.post("/rarest-items")
async def get_rarest_items(request: ProfileRequest) -> dict[str, Any]:
    payload = request.model_dump(by_alias=True, exclude_none=True)
    try:
        return get_container().rarest.get_rarest_items(payload)
    except ProfileFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CorpusUnavailableError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error in get_rarest_items")
        raise HTTPException(status_code=500, detail="Internal server error") from exc
