# /social_muse/main.py

import os
import logging

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# --- Application-specific Router Imports ---
from .routers import (
    campaigns_router,
    draft_router,
    history_router,
)

# --- Service Imports for Startup Logic ---
from .db.database import SessionLocal, init_db
from .services import draft_service, history_service

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup: make sure the storage table exists, read history
    # from its slot and start with a blank form.
    init_db()
    store = history_service.HistoryStore(SessionLocal)
    store.load()
    app.state.history_store = store
    app.state.draft = draft_service.new_draft()
    yield
    logger.info("Social Muse shutting down.")

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Social Muse API",
    description="Creative assistant that turns campaign parameters into social copy, a design brief and artwork.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(campaigns_router.router, prefix="/api/campaigns", tags=["Campaigns"])
app.include_router(draft_router.router, prefix="/api/draft", tags=["Draft"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Social Muse is running!", "version": app.version}
