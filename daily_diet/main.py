import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from daily_diet.api.router import api_router
from daily_diet.core import settings
from daily_diet.core.database import init_database
from daily_diet.core.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Daily Diet - meals and on-diet streaks")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    await init_database()
    logger.info("Приложение запущено!")


@app.get("/")
async def root():
    return {
        "app": "Daily Diet",
        "message": "Daily Diet - track your meals and on-diet streaks",
        "links": {
            "meals": "/meals",
            "summary": "/meals/summary",
            "users": "/users",
            "docs": "/docs",
        }
    }
