# server/api/auth.py

import logging
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, Depends, Request, status
from fastapi.security import OAuth2PasswordBearer

from server.core.accounts import AccountService
from server.core.tokens import TokenService
from server.errors import Forbidden, InfrastructureError, Unauthorized, ValidationError
from server.models import User as UserModel
from server.storage import Storage, get_storage


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class AuthResponse(BaseModel):
    user: User
    token: str


# -------------------------------
# Dependencies
# -------------------------------

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_account_service(
    storage: Storage = Depends(get_storage),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(storage, tokens)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    tokens: TokenService = Depends(get_token_service),
    storage: Storage = Depends(get_storage),
) -> UserModel:
    """
    Resolves the bearer token to a stored user.
    401 when no token is sent, 403 when it is invalid or its user is gone,
    500 when the user lookup itself fails.
    """
    if not token:
        raise Unauthorized("Access token required")

    claims = tokens.verify(token)
    if claims is None:
        raise Forbidden("Invalid or expired token")

    try:
        user = storage.get_user(claims.user_id)
    except Exception as e:
        raise InfrastructureError("Authentication error") from e

    if user is None:
        raise Forbidden("User not found")
    return user


def _require_credentials(creds: Credentials) -> tuple[str, str]:
    if not creds.username or not creds.password:
        raise ValidationError("Username and password are required")
    return creds.username, creds.password


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/login", response_model=AuthResponse)
def login(creds: Credentials, accounts: AccountService = Depends(get_account_service)):
    username, password = _require_credentials(creds)
    result = accounts.login(username, password)
    if not result:
        raise Unauthorized("Invalid credentials")
    return {"user": result.user, "token": result.token}


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(creds: Credentials, accounts: AccountService = Depends(get_account_service)):
    username, password = _require_credentials(creds)
    result = accounts.register(username, password)
    if not result:
        raise ValidationError("Username already exists")
    return {"user": result.user, "token": result.token}


@router.get("/user", response_model=User)
def read_current_user(current_user: UserModel = Depends(get_current_user)):
    return current_user


@router.post("/logout")
def logout():
    # Tokens are stateless; the client drops its copy.
    return {"message": "Logged out successfully"}
