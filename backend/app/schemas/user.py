from pydantic import BaseModel


# Schema for registration
class UserCreate(BaseModel):
    username: str
    password: str

# Schema for login (JSON body)
class UserLogin(BaseModel):
    username: str
    password: str

# Schema for returning user (without password hash)
class UserResponse(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True

class LoginResponse(BaseModel):
    user: UserResponse
    success: bool
    message: str
