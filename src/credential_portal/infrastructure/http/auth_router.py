"""FastAPI router for server-rendered registration and login pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from credential_portal.application.ports.password_hasher_port import PasswordHashingError
from credential_portal.application.services.auth_service import AuthOutcome, AuthService
from credential_portal.application.services.registration_service import RegistrationService
from credential_portal.domain.auth.credentials import InvalidUsernameError
from credential_portal.infrastructure.http.shell_context import build_shell_context

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
logger = logging.getLogger(__name__)


def build_auth_router(
    *,
    auth_service: AuthService,
    registration_service: RegistrationService,
    templates: Jinja2Templates | None = None,
) -> APIRouter:
    """Build router exposing register and login form pages and submissions."""

    if templates is None:
        templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
    router = APIRouter(tags=["auth"])

    @router.get("/register", response_class=HTMLResponse)
    async def render_register_page(request: Request) -> Response:
        return templates.TemplateResponse(
            request=request,
            name="register.html",
            context=build_shell_context(page_title="Register", active_nav="register"),
        )

    @router.post("/register")
    async def submit_register_form(
        username: Annotated[str, Form()] = "",
        password: Annotated[str, Form()] = "",
    ) -> RedirectResponse:
        try:
            await registration_service.register(username=username, password=password)
        except InvalidUsernameError:
            logger.info("registration_rejected reason=empty_username")
            return RedirectResponse(url="/register", status_code=303)
        except PasswordHashingError:
            logger.exception("registration_failed username=%s reason=hashing_error", username)
            return RedirectResponse(url="/register", status_code=303)

        logger.info("registration_succeeded username=%s", username)
        return RedirectResponse(url="/login", status_code=303)

    @router.get("/login", response_class=HTMLResponse)
    async def render_login_page(request: Request) -> Response:
        return templates.TemplateResponse(
            request=request,
            name="login.html",
            context=build_shell_context(page_title="Log in", active_nav="login"),
        )

    @router.post("/login")
    async def submit_login_form(
        username: Annotated[str, Form()] = "",
        password: Annotated[str, Form()] = "",
    ) -> RedirectResponse:
        try:
            result = await auth_service.authenticate(username=username, password=password)
        except PasswordHashingError:
            logger.exception("login_failed username=%s reason=hashing_error", username)
            return RedirectResponse(url="/login", status_code=303)
        if result.outcome is not AuthOutcome.SUCCESS:
            logger.info("login_failed username=%s reason=%s", username, result.outcome.value)
            return RedirectResponse(url="/login", status_code=303)

        logger.info("login_succeeded username=%s", username)
        return RedirectResponse(url="/", status_code=303)

    return router
