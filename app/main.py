from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import CORS_ORIGINS
from app.dependencies.database import close_mongo_client
from app.logger import logger
from app.routers.student.submissions import router as student_submissions_router
from app.routers.lecturer.reports import router as lecturer_reports_router
from app.routers.admin.dashboard import router as admin_dashboard_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Service started")
    yield
    close_mongo_client()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(student_submissions_router)
app.include_router(lecturer_reports_router)
app.include_router(admin_dashboard_router)
