from fastapi import APIRouter, Header, HTTPException, Request, status
from typing import Optional
from dependencies import get_auth_service
from routers.crud import REST_PREFIX
from schemas.auth import Account, LoginRequest, MessageResponse, SignupRequest, TokenResponse
from services.auth import AuthError, DuplicateAccount
from logging_config import get_logger

logger = get_logger(__name__)

auth_router = APIRouter(prefix=f"{REST_PREFIX}/auth", tags=["auth"])


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


@auth_router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, request: Request):
    logger.info(f"Signup request for {body.username} from {request.client.host if request.client else 'unknown'}")
    try:
        return get_auth_service(request).signup(body.username, body.email, body.password)
    except DuplicateAccount as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@auth_router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, request: Request):
    try:
        return get_auth_service(request).login(body.username, body.password)
    except AuthError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@auth_router.get("/me", response_model=Account)
async def me(request: Request, authorization: Optional[str] = Header(None)):
    try:
        return get_auth_service(request).me(bearer_token(authorization))
    except AuthError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e), headers={"WWW-Authenticate": "Bearer"})


@auth_router.post("/logout", response_model=MessageResponse)
async def logout(request: Request, authorization: Optional[str] = Header(None)):
    if get_auth_service(request).logout(bearer_token(authorization)):
        return MessageResponse(message="Logged out")
    return MessageResponse(message="No active session")
