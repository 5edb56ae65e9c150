from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
import logging
import uvicorn

from loanlink.core.config import settings
from loanlink.core.database import Database
from loanlink.core.logging_config import setup_logging
from loanlink.core.security import FirebaseTokenVerifier
from loanlink.modules.loans.router import router as loans_router
from loanlink.modules.applications.router import router as applications_router
from loanlink.modules.users.router import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    setup_logging(settings.LOG_LEVEL)
    service_account = settings.service_account

    database = Database(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)
    await database.connect()
    app.state.database = database
    app.state.token_verifier = FirebaseTokenVerifier(service_account["project_id"])
    logger.info(f"{settings.APP_NAME} started for project {service_account['project_id']}")

    yield

    # Shutdown
    await app.state.token_verifier.close()
    await database.close()


app = FastAPI(
    title="LoanLink API",
    description="Loans, loan applications and users",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(loans_router)
app.include_router(applications_router)
app.include_router(users_router)


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    await request.app.state.database.ping()
    return {
        "status": "ok",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "Hello from Server.."


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
