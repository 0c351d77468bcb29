from fastapi import FastAPI, APIRouter
from course_library.core.config import settings
from course_library.core.middleware_request import RequestContextMiddleware
from course_library.core.logging import setup_logging
from course_library.core.errors import register_exception_handlers

# Routers
from course_library.api.routes.authors import router as authors_router
from course_library.api.routes.author_collections import router as author_collections_router
from course_library.api.routes.courses import router as courses_router


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Course Library API - authors and the courses they teach.",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

# Middlewares
app.add_middleware(RequestContextMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Course Library API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_v1_str": settings.API_V1_STR,
        "endpoints": {
            "authors": f"{settings.API_V1_STR}/authors",
            "authorcollections": f"{settings.API_V1_STR}/authorcollections",
            "courses": f"{settings.API_V1_STR}/authors/{{author_id}}/courses",
        },
    }

register_exception_handlers(app)

# Mount routers
api = APIRouter(prefix=settings.API_V1_STR)
api.include_router(authors_router)
api.include_router(author_collections_router)
api.include_router(courses_router)
app.include_router(api)
