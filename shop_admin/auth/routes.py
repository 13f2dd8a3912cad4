from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from .dependencies import AccessTokenBearer, get_current_user
from .schemas import UserLoginModel, LoginResponse
from .service import AuthService

from shop_admin.db.main import get_session
from shop_admin.db.models import User
from shop_admin.db.redis import add_jti_to_blocklist
from shop_admin.users.repository import UserRepository
from shop_admin.users.schemas import UserResponse


auth_router = APIRouter()


def get_auth_service(session: AsyncSession = Depends(get_session)) -> AuthService:
    return AuthService(UserRepository(session))


@auth_router.post('/login', response_model=LoginResponse)
async def login_users(login_data: UserLoginModel, auth_service: AuthService = Depends(get_auth_service)):
    return await auth_service.login(login_data.email, login_data.password)


@auth_router.get('/validate_token')
async def validate_token(token_details: dict = Depends(AccessTokenBearer())):
    return JSONResponse(content={"valid": True})


@auth_router.get('/me', response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    return user


@auth_router.get('/logout')
async def revoke_token(token_details: dict = Depends(AccessTokenBearer())):
    jti = token_details["jti"]

    await add_jti_to_blocklist(jti)

    return JSONResponse(
        content={
            "message": "Logout Successful"
        },
        status_code=status.HTTP_200_OK
    )
