from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.workout_plan import WorkoutPlan
from app.models.exercise import Exercise
from app.schemas.workout_plan import WorkoutPlanCreate

"""
Workout Plan CRUD
-----------------
Database access for workout plans. Deleting a plan also removes its
exercises; both statements run in one transaction.
"""

async def create_workout_plan(db: AsyncSession, plan: WorkoutPlanCreate):
    db_plan = WorkoutPlan(
        user_id=plan.user_id,
        plan_name=plan.plan_name,
        description=plan.description,
    )
    db.add(db_plan)
    await db.commit()
    await db.refresh(db_plan)
    return db_plan

async def get_workout_plans_for_user(db: AsyncSession, user_id: int):
    result = await db.execute(
        select(WorkoutPlan)
        .where(WorkoutPlan.user_id == user_id)
        .order_by(WorkoutPlan.plan_id)
    )
    return result.scalars().all()

async def _delete_plan_exercises(db: AsyncSession, plan_id: int) -> int:
    result = await db.execute(
        delete(Exercise)
        .where(Exercise.plan_id == plan_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount

async def _delete_plan_row(db: AsyncSession, plan_id: int) -> int:
    result = await db.execute(
        delete(WorkoutPlan)
        .where(WorkoutPlan.plan_id == plan_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount

async def delete_workout_plan(db: AsyncSession, plan_id: int) -> bool:
    """
    Delete a plan and all of its exercises atomically.

    Exercises go first so the plan row is never removed while rows still
    reference it. Any error rolls back both deletes. Returns False when no
    plan with that id existed; the (empty) exercise delete is still committed.
    """
    async with db.begin():
        await _delete_plan_exercises(db, plan_id)
        deleted = await _delete_plan_row(db, plan_id)
    return deleted > 0
