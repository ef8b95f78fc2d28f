# Import all models here
from app.models.user import User
from app.models.workout_plan import WorkoutPlan
from app.models.exercise import Exercise
