# pulse/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pulse import models  # noqa: F401 - register tables on Base.metadata
from pulse.api import auth, review, search, summary
from pulse.config import settings
from pulse.database import Base, engine
from pulse.exception_handlers import register_exception_handlers
from pulse.logging_config import configure_logging

configure_logging()

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="PULSE API", version="1.0.0")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# API routers
app.include_router(auth.router)     # /register, /login, /verify, /resend-verification
app.include_router(review.router)   # /api/reviews/*
app.include_router(search.router)   # /api/search
app.include_router(summary.router)  # /api/summarize-reviews


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "PULSE API is running",
        "version": "1.0.0",
    }
