"""
Подсчёт статистики по приёмам пищи и лучшей серии "по диете".

Серия считается в том порядке, в котором пришли приёмы пищи. Сводка
запрашивает их отсортированными по дате по убыванию, и этот порядок
важен при одинаковых датах.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping


@dataclass
class DietSummary:
    best_on_diet_sequence: int = 0
    meals: List[Any] = field(default_factory=list)
    total_meals: int = 0
    total_meals_on_diet: int = 0
    total_meals_off_diet: int = 0


def is_on_diet(meal: Any) -> bool:
    """Флаг diet у ORM-объекта, словаря или просто bool"""
    if isinstance(meal, bool):
        return meal
    if isinstance(meal, Mapping):
        return bool(meal.get("diet"))
    return bool(getattr(meal, "diet", False))


def best_on_diet_sequence(meals: Iterable[Any]) -> int:
    """Длина самой длинной непрерывной серии приёмов пищи с diet=True"""
    current_sequence = 0
    best_sequence = 0

    for meal in meals:
        if is_on_diet(meal):
            current_sequence += 1
        else:
            current_sequence = 0

        if current_sequence > best_sequence:
            best_sequence = current_sequence

    return best_sequence


def summarize_meals(meals: Iterable[Any]) -> DietSummary:
    meals = list(meals)
    on_diet = sum(1 for meal in meals if is_on_diet(meal))

    return DietSummary(
        best_on_diet_sequence=best_on_diet_sequence(meals),
        meals=meals,
        total_meals=len(meals),
        total_meals_on_diet=on_diet,
        total_meals_off_diet=len(meals) - on_diet,
    )
