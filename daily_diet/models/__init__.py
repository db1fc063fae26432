from daily_diet.models.user import User
from daily_diet.models.meal import Meal

__all__ = ["User", "Meal"]
