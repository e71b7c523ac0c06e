"""FastAPI dependencies resolving the startup-built ServiceContext.

Usage in a router:
    @router.get("/x")
    async def x(generator: Annotated[SnowflakeGenerator, Depends(get_generator)]):
        ...
"""

from fastapi import Request

from src.sf_common.errors import InternalError
from src.sf_snowflake.application.context import ServiceContext
from src.sf_snowflake.application.service import SnowflakeGenerator


def get_context(request: Request) -> ServiceContext:
    context: ServiceContext | None = getattr(request.app.state, "context", None)
    if context is None:
        raise InternalError("Service context not initialized")
    return context


def get_generator(request: Request) -> SnowflakeGenerator:
    return get_context(request).generator
