from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from course_planner.controllers.courseController import router as course_router
from course_planner.controllers.catalogController import router as catalog_router
from course_planner.controllers.CourseTreeController import router as course_tree_router
from course_planner.catalog import on_startup as load_catalog, on_shutdown as clear_catalog
import logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await load_catalog()
    logger.info("Course Planner API started")
    yield
    await clear_catalog()
    logger.info("Course Planner API stopped")

app = FastAPI(
    title="Course Planner API",
    description="API for browsing an in-memory course catalog and its prerequisites",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(course_router, prefix="/api/v1", tags=["Courses"])
app.include_router(catalog_router, prefix="/api/v1", tags=["Catalog"])
app.include_router(course_tree_router, prefix="/api/v1", tags=["Course Tree"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health():
    return {"status": "ok"}
