import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from advisor.components.exception.exception import CareerCoachException
from advisor.components.src_logging.logger import logging
from backend import config
from backend.database.database import init_db
from backend.routes.assessment_routes import router as assessment_router
from backend.routes.auth_routes import router as auth_router
from backend.routes.career_path_routes import router as career_path_router
from backend.routes.goal_routes import router as goal_router
from backend.routes.interview_routes import router as interview_router
from backend.routes.recommendation_routes import router as recommendation_router
from backend.routes.resume_routes import router as resume_router
from backend.routes.skill_routes import router as skill_router
from backend.routes.user_routes import router as user_router

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logging.info("Career Coach API started")
    yield


app = FastAPI(title="Career Coach API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Invalid input", "errors": errors})


@app.exception_handler(CareerCoachException)
async def career_coach_error_handler(request: Request, exc: CareerCoachException):
    logging.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logging.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Register the routes
app.include_router(auth_router)
app.include_router(user_router)
app.include_router(assessment_router)
app.include_router(resume_router)
app.include_router(interview_router)
app.include_router(career_path_router)
app.include_router(skill_router)
app.include_router(goal_router)
app.include_router(recommendation_router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
