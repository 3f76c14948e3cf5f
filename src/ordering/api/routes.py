"""FastAPI routes for the Ordering domain (checkout)."""

from fastapi import APIRouter, Depends, Header

from identity.session.tokens import bearer_token
from shared.web import ErrorResponse, get_container

from ordering.api.schemas import CheckoutRequest, CheckoutResponse

checkout_router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@checkout_router.post(
    "",
    response_model=CheckoutResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def checkout(
    body: CheckoutRequest,
    authorization: str = Header(default=""),
    container=Depends(get_container),
) -> CheckoutResponse:
    """Price the basket for the authenticated user and hand it to the gateway."""
    result = container.checkout_service.checkout(
        token=bearer_token(authorization),
        items=[item.to_domain() for item in body.items],
        freight=body.freight,
        payment_method=body.payment_method,
        card_data=body.card_data.model_dump() if body.card_data else None,
    )
    return CheckoutResponse.from_domain(result)
