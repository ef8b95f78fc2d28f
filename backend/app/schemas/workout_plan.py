from pydantic import BaseModel
from typing import Optional

# Fields are optional on purpose: missing values are rejected by the
# table's NOT NULL / foreign key constraints, not here.
class WorkoutPlanCreate(BaseModel):
    user_id: Optional[int] = None
    plan_name: Optional[str] = None
    description: Optional[str] = None

class WorkoutPlanSummary(BaseModel):
    plan_id: int
    plan_name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True

class WorkoutPlanResponse(WorkoutPlanSummary):
    user_id: int

class MessageResponse(BaseModel):
    success: bool
    message: str
