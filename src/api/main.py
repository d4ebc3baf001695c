import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.action_items import router as action_items_router
from src.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Meeting Assistant API",
    description="Action-item tracking for recorded meetings",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8501",
    ],
    allow_origin_regex=r"https://.*\.vercel\.app|http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(action_items_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
