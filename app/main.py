import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import configure_logging
from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.records import router as records_router
from app.api.http.documents import router as documents_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Legal Records",
    description="Просмотр кабинетов, клиентов, дел и документов юридической практики",
    version="1.0.0"
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(records_router)
app.include_router(documents_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Legal Records API",
        "version": "1.0.0",
        "docs": "/docs"
    }


logger.info("Legal Records API initialised")
