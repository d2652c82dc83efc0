"""
Cleanroom HVAC — FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cleanroom.api.router import router
from cleanroom.config import CORS_ORIGINS

app = FastAPI(
    title="Cleanroom HVAC API",
    description="Cleanroom HVAC load calculation engine for project intake",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "cleanroom-hvac"}
