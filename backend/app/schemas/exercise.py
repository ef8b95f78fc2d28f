from pydantic import BaseModel
from typing import Optional

class ExerciseCreate(BaseModel):
    exercise_name: Optional[str] = None
    sets: Optional[int] = None
    repetitions: Optional[int] = None
    notes: Optional[str] = None

class ExerciseResponse(BaseModel):
    exercise_id: int
    plan_id: int
    exercise_name: str
    sets: Optional[int] = None
    repetitions: Optional[int] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True

class ExerciseCreatedResponse(BaseModel):
    success: bool
    message: str
    exercise: ExerciseResponse
