import logging

from fastapi import FastAPI

from muscleup.api.routes import sessions

# Logging
logger = logging.getLogger("muscleup_app")

# Initialize FastAPI app
app = FastAPI(title="MuscleUp Diet Report API")

# Include routers
app.include_router(sessions.router)


@app.get("/health")
def health():
    return {"status": "ok", "sessions": len(sessions.repository)}
