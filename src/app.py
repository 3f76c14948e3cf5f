"""Shopfront FastAPI application.

Serves the REST API (``/api/...``) and the GraphQL API (``/graphql``) from one
process. Both call the services held by a single ``Container``, the only place
that knows about every concrete implementation.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

import time
from uuid import uuid4

from catalog import InMemoryCatalog, ProductCatalog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from graphql_api import graphql_router
from identity.api import router as identity_router
from identity.auth import AuthService
from identity.port import TokenVerifier
from identity.session.tokens import TokenStore
from identity.user.repository import UserStore
from ordering.api import checkout_router
from ordering.checkout.service import CheckoutService
from payments.gateway import FakeGateway, PaymentGateway
from shared.config import Config, load_config
from shared.utils.logging import add_context, clear_context, configure_logging, get_logger
from shared.web import register_error_handlers

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Service container
# ---------------------------------------------------------------------------
class Container:
    """Owns the stores and wires services to their collaborators.

    Built once at process start. ``reset()`` empties the in-memory stores.
    """

    def __init__(
        self,
        config: Config,
        users: UserStore | None = None,
        tokens: TokenStore | None = None,
        catalog: ProductCatalog | None = None,
        gateway: PaymentGateway | None = None,
        token_verifier: TokenVerifier | None = None,
    ) -> None:
        self.config = config
        self.users = users if users is not None else UserStore()
        self.tokens = tokens if tokens is not None else TokenStore(token_bytes=config.token_bytes)
        self.catalog = catalog if catalog is not None else InMemoryCatalog.from_config(config.products)
        self.gateway = gateway if gateway is not None else FakeGateway()

        self.auth_service = AuthService(self.users, self.tokens)
        self.checkout_service = CheckoutService(
            auth=token_verifier if token_verifier is not None else self.auth_service,
            catalog=self.catalog,
            gateway=self.gateway,
        )

    @classmethod
    def from_config(cls, config: Config | None = None) -> "Container":
        return cls(config or load_config())

    def reset(self) -> None:
        self.users.reset()
        self.tokens.reset()
        if isinstance(self.gateway, FakeGateway):
            self.gateway.reset()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(container: Container | None = None) -> FastAPI:
    container = container or Container.from_config()
    config = container.config

    configure_logging(level=config.log_level, directory=config.log_directory, env=config.env)

    app = FastAPI(
        title="Shopfront API",
        description="User registration, authentication and checkout over REST and GraphQL",
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Bind a request id into the log context and log each completed request."""
        clear_context()
        add_context(request_id=uuid4().hex[:12], method=request.method, path=request.url.path)
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        clear_context()
        return response

    register_error_handlers(app)

    app.include_router(identity_router)
    app.include_router(checkout_router)
    app.include_router(graphql_router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "service": config.service_name,
                "environment": config.env,
            }
        )

    logger.info("Application created", environment=config.env, products=len(container.catalog.all()))
    return app


app = create_app()
