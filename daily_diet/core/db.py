import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from daily_diet.core.config import Settings, settings

logger = logging.getLogger(__name__)

ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
}


def async_database_url(url: str) -> str:
    """postgresql://... (и устаревший postgres://) → postgresql+asyncpg://...

    URL с уже указанным драйвером возвращается как есть.
    """
    parsed = make_url(url)
    driver = ASYNC_DRIVERS.get(parsed.drivername)
    if driver is None:
        return url
    return parsed.set(drivername=driver).render_as_string(hide_password=False)


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    url = async_database_url(config.DATABASE_URL)
    logger.debug("ASYNC DATABASE_URL = %s", make_url(url))
    return create_async_engine(
        url,
        echo=config.SQL_ECHO,
        pool_pre_ping=True,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
    )


engine = create_engine_from_settings(settings)

# ORM-объекты остаются читаемыми после commit
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db():
    """Одна сессия на запрос; закрывается после ответа"""
    async with AsyncSessionLocal() as session:
        yield session
