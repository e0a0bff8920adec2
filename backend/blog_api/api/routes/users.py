"""User Routes - signup and login.

Invariants:
    - POST /api/users logs in by default; {"action": "signup"} registers instead
    - Login success -> 200, signup success -> 201
    - Bad credentials -> 401, taken username -> 409, bad payload -> 400

Design Decisions:
    - /login and /signup aliases: each action also has its own unambiguous path
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from blog_api.core.domain_types import UserAction
from blog_api.schemas.user import Credentials, UserRequest
from blog_api.services.credential_store import CredentialStore
from blog_api.services.store_registry import get_credential_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("")
async def login_or_signup(
    body: UserRequest,
    response: Response,
    store: CredentialStore = Depends(get_credential_store),
):
    """Dispatch on body.action (login unless told otherwise)."""
    if body.action is UserAction.SIGNUP:
        await store.signup(body.credentials())
        response.status_code = status.HTTP_201_CREATED
        return {"message": "User created"}
    await store.login(body.credentials())
    return {"message": "Login successful"}


@router.post("/login")
async def login(
    body: Credentials, store: CredentialStore = Depends(get_credential_store),
):
    await store.login(body)
    return {"message": "Login successful"}


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: Credentials, store: CredentialStore = Depends(get_credential_store),
):
    await store.signup(body)
    return {"message": "User created"}
