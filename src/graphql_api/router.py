"""``POST /graphql`` endpoint executing the graphene schema."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from shared.utils.logging import get_logger
from shared.web import get_container

from graphql_api.resolvers import schema

logger = get_logger(__name__)

graphql_router = APIRouter(tags=["graphql"])


@graphql_router.post("/graphql")
async def graphql_endpoint(request: Request, container=Depends(get_container)) -> JSONResponse:
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict) or not payload.get("query"):
        return JSONResponse(status_code=400, content={"errors": [{"message": "Must provide query string."}]})

    result = await schema.execute_async(
        payload["query"],
        variable_values=payload.get("variables"),
        operation_name=payload.get("operationName"),
        context_value={"request": request, "container": container},
    )

    body: dict = {"data": result.data}
    if result.errors:
        body["errors"] = [error.formatted for error in result.errors]
        logger.info("GraphQL request returned errors", messages=[error.message for error in result.errors])

    # No data at all means the document never executed (syntax or validation error).
    status_code = 200 if result.data is not None else 400
    return JSONResponse(status_code=status_code, content=body)
