from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.routers import posts
from app.storage.database import init_db
from app.core.config import settings
from app.core.logx import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Upload directory: {settings.UPLOAD_DIR}")
    yield


app = FastAPI(title="SNS Server", lifespan=lifespan)

# 注册路由
app.include_router(posts.posts_router)

# uvicorn main:app
# uvicorn main:app --reload
@app.get("/")
def root():
    return {"message": "Welcome to SNS Server"}
