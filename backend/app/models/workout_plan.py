from sqlalchemy import Column, Integer, String, Text, ForeignKey
from app.database import Base

class WorkoutPlan(Base):
    __tablename__ = "workout_plan"

    plan_id = Column(Integer, primary_key=True, index=True)
    # No ON DELETE CASCADE: exercises are removed explicitly in the same transaction
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    plan_name = Column(String(100), nullable=False)
    description = Column(Text)
