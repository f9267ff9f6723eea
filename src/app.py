"""
Employee Records Backend API Server
Core functionality: employee CRUD and the increment-and-sum rule
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, SEED_DATABASE
from database.connection import init_database, close_database
from database.bootstrap import bootstrap_database
from api.routes import health, employees
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    await bootstrap_database(seed=SEED_DATABASE)
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Employee Records Backend",
    description="Backend API for employee records and the increment-and-sum rule",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(employees.router, prefix="/employees", tags=["Employees"])

# Server startup is handled by main.py at the project root
