from pydantic import BaseModel, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime, timedelta
from uuid import UUID

from daily_diet.services.time_utils import EPOCH


class MealCreate(BaseModel):
    name: StrictStr
    description: StrictStr
    diet: StrictBool


class MealReplace(BaseModel):
    """Полная замена приёма пищи (PUT): все поля обязательны"""
    name: StrictStr
    description: StrictStr
    diet: StrictBool
    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def numeric_date_is_epoch_ms(cls, value):
        # Число — всегда epoch-миллисекунды, строки разбирает pydantic
        if isinstance(value, bool):
            raise ValueError("date must be a timestamp or a date string")
        if isinstance(value, (int, float)):
            try:
                return EPOCH + timedelta(milliseconds=value)
            except OverflowError:
                raise ValueError("date is out of range")
        return value


class MealRead(BaseModel):
    id: UUID
    user_id: Optional[UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    diet: Optional[bool] = None
    date: Optional[int] = None

    class Config:
        from_attributes = True


class MealListResponse(BaseModel):
    meals: List[MealRead] = []


class MealResponse(BaseModel):
    meal: MealRead


class MealSummaryResponse(BaseModel):
    best_on_diet_sequence: int
    meals: List[MealRead] = []
    total_meals: int
    total_meals_on_diet: int
    total_meals_off_diet: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
