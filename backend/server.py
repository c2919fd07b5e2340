"""
Procurement Management System
Vendors, quotation requests and purchase requisition approvals - PostgreSQL Backend
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from pathlib import Path
import logging

# Load environment variables
ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

from app.common.settings import app_settings  # noqa: E402
from database import init_postgres_db, close_postgres_db  # noqa: E402

# ==================== Logging Configuration ====================
logging.basicConfig(
    level=app_settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ==================== Startup & Shutdown ====================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Procurement Management System...")
    await init_postgres_db()
    logger.info("PostgreSQL database initialized successfully")

    yield

    logger.info("Shutting down...")
    await close_postgres_db()
    logger.info("Database connections closed")


# Create the main app
app = FastAPI(
    title=app_settings.app_name,
    description="Procurement Management System - PostgreSQL Backend",
    version=app_settings.version,
    lifespan=lifespan,
)


# Health check endpoint at root level (for Kubernetes)
@app.get("/health")
async def root_health_check():
    """Health check endpoint for Kubernetes liveness/readiness probes"""
    return {"status": "healthy", "database": "PostgreSQL"}

# ==================== PostgreSQL Routes ====================
from routes.pg_vendors_routes import pg_vendors_router  # noqa: E402
from routes.pg_quotations_routes import pg_quotations_router  # noqa: E402
from routes.pg_requisitions_routes import pg_requisitions_router  # noqa: E402

app.include_router(pg_vendors_router)
app.include_router(pg_quotations_router)
app.include_router(pg_requisitions_router)

# ==================== CORS Configuration ====================
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=app_settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)
