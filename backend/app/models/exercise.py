from sqlalchemy import Column, Integer, String, Text, ForeignKey
from app.database import Base

class Exercise(Base):
    __tablename__ = "exercise"

    exercise_id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("workout_plan.plan_id"), nullable=False, index=True)
    exercise_name = Column(String(100), nullable=False)
    sets = Column(Integer)
    repetitions = Column(Integer)
    notes = Column(Text)
