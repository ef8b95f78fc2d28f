from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.user import UserCreate, UserLogin, UserResponse, LoginResponse
from app.crud import user as crud_user
from app.utils.utils import verify_password_async

router = APIRouter(prefix="/api/users", tags=["users"])

# POST - Register a new user
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    # A taken username fails on the unique constraint and surfaces as a 500
    return await crud_user.create_user(db=db, user=user)

# POST - Check credentials
@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Incorrect password"}, 404: {"description": "User not found"}},
)
async def login(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await crud_user.get_user_by_username(db, username=login_data.username)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": "User not found"},
        )

    if not await verify_password_async(login_data.password, user.password):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "message": "Incorrect password"},
        )

    return {"user": user, "success": True, "message": "Login successful"}
