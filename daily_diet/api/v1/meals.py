import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from daily_diet.core.dependencies import get_current_user, get_meal_repository
from daily_diet.models.user import User
from daily_diet.repositories.meal_repository import MealRepository
from daily_diet.schemas.meal import (
    MealCreate,
    MealReplace,
    MealRead,
    MealListResponse,
    MealResponse,
    MealSummaryResponse,
)
from daily_diet.services.diet_streak import summarize_meals
from daily_diet.services.time_utils import to_epoch_ms

logger = logging.getLogger(__name__)

router = APIRouter(tags=["meals"])


@router.get("", response_model=MealListResponse)
async def list_meals(
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    """Список приёмов пищи.

    Фильтр по владельцу здесь не применяется: отдаются все строки таблицы.
    """
    meals = await repo.list_all()
    return MealListResponse(meals=[MealRead.model_validate(m) for m in meals])


# /summary объявлен раньше /{meal_id}, иначе его перехватит маршрут с UUID
@router.get("/summary", response_model=MealSummaryResponse)
async def get_summary(
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    """Сводка по диете: лучшая серия и счётчики"""
    meals = await repo.list_by_user(current_user.id)
    summary = summarize_meals(meals)

    return MealSummaryResponse(
        best_on_diet_sequence=summary.best_on_diet_sequence,
        meals=[MealRead.model_validate(m) for m in summary.meals],
        total_meals=summary.total_meals,
        total_meals_on_diet=summary.total_meals_on_diet,
        total_meals_off_diet=summary.total_meals_off_diet,
    )


@router.get("/{meal_id}", response_model=MealResponse)
async def get_meal(
        meal_id: UUID,
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    meal = await repo.get_by_id(meal_id)
    if not meal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found")

    return MealResponse(meal=MealRead.model_validate(meal))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
        meal_data: MealCreate,
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    meal = await repo.create(
        user_id=current_user.id,
        name=meal_data.name,
        description=meal_data.description,
        diet=meal_data.diet,
    )
    logger.info(f"Создан приём пищи {meal.id} пользователя {current_user.id}")
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{meal_id}", status_code=status.HTTP_201_CREATED)
async def replace_meal(
        meal_id: UUID,
        meal_data: MealReplace,
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    """Полная замена полей приёма пищи. Несуществующий id — тихий no-op, ответ всё равно 201"""
    await repo.replace(
        meal_id,
        name=meal_data.name,
        description=meal_data.description,
        diet=meal_data.diet,
        date_ms=to_epoch_ms(meal_data.date),
    )
    logger.info(f"Обновлён приём пищи {meal_id}")
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{meal_id}", status_code=status.HTTP_201_CREATED)
async def delete_meal(
        meal_id: UUID,
        current_user: User = Depends(get_current_user),
        repo: MealRepository = Depends(get_meal_repository),
):
    await repo.delete(meal_id)
    logger.info(f"Удалён приём пищи {meal_id}")
    return Response(status_code=status.HTTP_201_CREATED)
