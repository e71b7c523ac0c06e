"""sf_snowflake endpoints.

GET /                               — new id as a plain-text decimal
GET /api/v1/snowflakes              — new id in the ApiResponse envelope
GET /api/v1/snowflakes/{id}         — decode an id into its fields
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from src.sf_common.errors import AppError, InvalidSnowflakeError
from src.sf_common.response import ApiResponse, success_response
from src.sf_snowflake.api.dependencies import get_context, get_generator
from src.sf_snowflake.application.context import ServiceContext
from src.sf_snowflake.application.schemas import SnowflakeDetail, SnowflakeOut
from src.sf_snowflake.application.service import SnowflakeGenerator

plain_router = APIRouter(tags=["snowflakes"])
router = APIRouter(prefix="/snowflakes", tags=["snowflakes"])


@plain_router.get("/", response_class=PlainTextResponse)
async def get_snowflake_id(
    generator: Annotated[SnowflakeGenerator, Depends(get_generator)],
) -> PlainTextResponse:
    try:
        snowflake_id = await generator.generate_new()
    except AppError as exc:
        return PlainTextResponse(exc.message, status_code=exc.http_status)
    return PlainTextResponse(str(snowflake_id))


@router.get("")
async def new_snowflake(
    request: Request,
    generator: Annotated[SnowflakeGenerator, Depends(get_generator)],
) -> ApiResponse:
    snowflake_id = await generator.generate_new()
    result = SnowflakeOut(id=str(snowflake_id), machine_id=generator.machine_id)
    return success_response(result.model_dump(), getattr(request.state, "request_id", None))


@router.get("/{snowflake_id}")
async def decode_snowflake(
    snowflake_id: str,
    request: Request,
    context: Annotated[ServiceContext, Depends(get_context)],
) -> ApiResponse:
    # int() alone would also take "+12", "1_2" and padded whitespace
    if not (snowflake_id.isascii() and snowflake_id.isdigit()):
        raise InvalidSnowflakeError(snowflake_id)
    value = int(snowflake_id)
    parts = context.generator.decode(value)
    result = SnowflakeDetail.from_parts(
        value, parts, context.settings.TIMEZONE, context.settings.EPOCH_MS
    )
    return success_response(result.model_dump(mode="json"), getattr(request.state, "request_id", None))
