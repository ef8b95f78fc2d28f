from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate

async def create_exercise(db: AsyncSession, plan_id: int, exercise: ExerciseCreate):
    db_exercise = Exercise(plan_id=plan_id, **exercise.model_dump())
    db.add(db_exercise)
    await db.commit()
    await db.refresh(db_exercise)
    return db_exercise

async def get_exercises_for_plan(db: AsyncSession, plan_id: int):
    result = await db.execute(
        select(Exercise)
        .where(Exercise.plan_id == plan_id)
        .order_by(Exercise.exercise_id)
    )
    return result.scalars().all()
