import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logx import logger
from app.core.biz_response import BizResponse, validation_message
from app.routers import pages, posts, media
from app.storage.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 生产环境假定表结构已存在，只在其它环境自动建表
    if settings.is_production:
        logger.info("ENV=production, skip auto-migrate")
    else:
        init_db()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录每个请求的方法、路径、状态码和耗时"""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.2f}ms")
    return response


# 请求体解析 / 校验失败统一返回 400
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return BizResponse(msg=validation_message(exc), status_code=400)


# 路由不存在、方法不允许等框架异常也使用统一错误格式
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return BizResponse(msg=str(exc.detail), status_code=exc.status_code)


# 注册路由
app.include_router(pages.pages_router, prefix=settings.api_prefix)
app.include_router(posts.posts_router, prefix=settings.api_prefix)
app.include_router(media.media_router, prefix=settings.api_prefix)

# uvicorn main:app
# uvicorn main:app --reload
@app.get("/")
def root():
    return {"message": "Welcome to CMS Backend"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
