"""
Jobly - Main Application

FastAPI backend with:
- PostgreSQL for companies, jobs, users and applications
- JWT authentication (admin / same user / anonymous)

Run: uvicorn jobly.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobly import __version__
from jobly.api.routes import api_router
from jobly.core.config import get_settings
from jobly.core.errors import register_exception_handlers
from jobly.core.logging_config import get_logger, setup_logging

settings = get_settings()

setup_logging(log_level=settings.log_level, json_logs=settings.json_logs)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Jobly",
    description="""
    Job board API over companies, jobs and users.

    ## Features
    - **Authentication**: JWT tokens from /auth/token or /auth/register
    - **Companies**: Search by name and size; admins create, update, delete
    - **Jobs**: Search by title, salary and equity; admins create, update, delete
    - **Users**: Profiles and job applications, visible to the user and admins
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router)

logger.info(f"Jobly started (env={settings.jobly_env}, database={settings.database_name})")


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from jobly.db.postgres import test_postgres_connection

    connected = test_postgres_connection()
    return {
        "status": "healthy" if connected else "degraded",
        "postgres": "connected" if connected else "disconnected",
    }
