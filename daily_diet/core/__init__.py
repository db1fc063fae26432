from daily_diet.core.config import settings
from daily_diet.core.base import Base
from daily_diet.core.db import engine, get_db

# init_database не реэкспортируется: core.database тянет модели,
# а модели импортируют core.base
__all__ = ["settings", "engine", "Base", "get_db"]
