from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from inkwell.routers import blog, pages
from inkwell.models import blog as blog_models, page as page_models  # noqa: F401 (register tables)
from inkwell.core.config import settings
from inkwell.core.exceptions import InkwellError
from inkwell.schemas.common import ErrorResponse, HealthCheck

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # NOTE: Database migrations are managed by Alembic.
    # Run: alembic upgrade head
    logger.info("Starting application...")

    if settings.AUTO_CREATE_TABLES:
        from inkwell.database.engine import create_db_and_tables
        create_db_and_tables()
        logger.info("Database tables created")

    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")

app = FastAPI(
    title="Inkwell",
    description="RPC backend for a personal blog: categories, tags, articles and static pages",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(InkwellError)
async def inkwell_error_handler(request: Request, exc: InkwellError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.error_code, message=exc.message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "error": "BAD_REQUEST",
            "message": "Invalid input",
            "details": {"errors": jsonable_encoder(exc.errors())}
        }
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error in {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="INTERNAL_SERVER_ERROR", message="Internal server error").model_dump()
    )


app.include_router(blog.router)   # /rpc/* categories, tags, articles
app.include_router(pages.router)  # /rpc/* static pages

@app.get("/")
def read_root():
    return {
        "message": "Welcome to Inkwell API",
        "version": "1.0.0",
        "rpc": "/rpc/<procedure> (queries: GET ?input=<json>, mutations: POST json body)",
        "docs": "/docs",
        "redoc": "/redoc"
    }

@app.get("/rpc/healthcheck", response_model=HealthCheck)
def healthcheck():
    return HealthCheck(status="ok", timestamp=datetime.now(timezone.utc))


def run():
    import uvicorn
    uvicorn.run("inkwell.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    run()
