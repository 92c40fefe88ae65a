"""web entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from credential_portal.application.ports.password_hasher_port import PasswordHasherPort
from credential_portal.application.ports.user_repository_port import UserRepositoryPort
from credential_portal.application.services.auth_service import AuthService
from credential_portal.application.services.registration_service import RegistrationService
from credential_portal.config.settings import Settings, load_settings
from credential_portal.infrastructure.bootstrap import (
    ensure_bootstrap_user,
    resolve_bootstrap_config,
)
from credential_portal.infrastructure.http.auth_router import TEMPLATE_DIR, build_auth_router
from credential_portal.infrastructure.http.shell_context import build_shell_context
from credential_portal.infrastructure.logging import configure_logging
from credential_portal.infrastructure.memory.user_repository import InMemoryUserRepository
from credential_portal.infrastructure.security.password_hasher import BcryptPasswordHasher

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080
logger = logging.getLogger(__name__)


def create_app(
    *,
    settings: Settings | None = None,
    users: UserRepositoryPort | None = None,
    password_hasher: PasswordHasherPort | None = None,
) -> FastAPI:
    """Create FastAPI app serving home, registration and login pages."""

    if settings is None:
        settings = load_settings()
    configure_logging(level=settings.log_level)

    if users is None:
        users = InMemoryUserRepository()
    if password_hasher is None:
        password_hasher = BcryptPasswordHasher(rounds=settings.password_hash_rounds)

    registration_service = RegistrationService(users=users, password_hasher=password_hasher)
    auth_service = AuthService(users=users, password_hasher=password_hasher)
    bootstrap_config = resolve_bootstrap_config(
        username=settings.bootstrap_username,
        password=settings.bootstrap_password,
        password_file=settings.bootstrap_password_file,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if bootstrap_config is not None:
            result = await ensure_bootstrap_user(
                users=users,
                registration_service=registration_service,
                config=bootstrap_config,
            )
            logger.info(
                "bootstrap_user_result username=%s outcome=%s",
                result.username,
                result.outcome.value,
            )
        yield

    templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
    app = FastAPI(lifespan=lifespan)
    app.include_router(
        build_auth_router(
            auth_service=auth_service,
            registration_service=registration_service,
            templates=templates,
        )
    )

    @app.get("/", response_class=HTMLResponse)
    async def render_home_page(request: Request) -> Response:
        return templates.TemplateResponse(
            request=request,
            name="home.html",
            context=build_shell_context(page_title="Home", active_nav="home"),
        )

    return app


def run_asgi_server(*, host: str = WEB_HOST, port: int = WEB_PORT) -> None:
    """Run the web app as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.web.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run web runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
