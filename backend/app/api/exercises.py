from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseCreatedResponse
from app.crud import exercise as crud_exercise

router = APIRouter(prefix="/api/exercises", tags=["Exercises"])

@router.post("/{plan_id}", response_model=ExerciseCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_exercise(plan_id: int, exercise: ExerciseCreate, db: AsyncSession = Depends(get_db)):
    # An unknown plan_id is rejected by the exercise.plan_id foreign key
    new_exercise = await crud_exercise.create_exercise(db, plan_id, exercise)
    return {
        "success": True,
        "message": "Exercise added to workout plan successfully.",
        "exercise": new_exercise,
    }

@router.get("/{plan_id}", response_model=List[ExerciseResponse])
async def list_exercises(plan_id: int, db: AsyncSession = Depends(get_db)):
    return await crud_exercise.get_exercises_for_plan(db, plan_id)
