from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.workout_plan import (
    WorkoutPlanCreate,
    WorkoutPlanResponse,
    WorkoutPlanSummary,
    MessageResponse,
)
from app.crud import workout_plan as crud_plan

router = APIRouter(
    prefix="/api/workout-plans",
    tags=["Workout Plans"]
)

@router.post("", response_model=WorkoutPlanResponse, status_code=status.HTTP_201_CREATED)
async def create_plan(plan: WorkoutPlanCreate, db: AsyncSession = Depends(get_db)):
    return await crud_plan.create_workout_plan(db, plan)

@router.get("/{user_id}", response_model=List[WorkoutPlanSummary])
async def list_plans(user_id: int, db: AsyncSession = Depends(get_db)):
    return await crud_plan.get_workout_plans_for_user(db, user_id)

@router.delete(
    "/{plan_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse, "description": "Workout plan not found"}},
)
async def delete_plan(plan_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a workout plan together with its exercises.
    """
    deleted = await crud_plan.delete_workout_plan(db, plan_id)
    if not deleted:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": "Workout plan not found."},
        )

    return {
        "success": True,
        "message": f"Workout plan with ID {plan_id} and associated exercises deleted successfully.",
    }
