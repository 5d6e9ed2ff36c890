import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import InvalidInputError
from app.routers import health, packing, recommendations
from app.routers import weather as weather_router

logging.getLogger("app").setLevel(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins if origins != ["*"] else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(health.router, prefix=prefix)
app.include_router(recommendations.router, prefix=prefix)
app.include_router(packing.router, prefix=prefix)
app.include_router(weather_router.router, prefix=prefix)

logger = logging.getLogger("app.requests")


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.info("invalid input path=%s code=%s field=%s", request.url.path, exc.code, exc.field)
    return JSONResponse(status_code=422, content=exc.as_dict())


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
