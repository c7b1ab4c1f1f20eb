from fastapi import APIRouter, HTTPException, Depends, status
from course_planner.catalog import CourseCatalog, get_course_catalog
from typing import List
from course_planner.models.Courses import CourseCreate, CourseResponse
from course_planner.helpers.exceptions import CourseNotFoundError
from course_planner.helpers.helpers import serialize_course

router = APIRouter()

#Create Course
@router.post("/courses/", status_code=status.HTTP_201_CREATED)
async def create_course(course: CourseCreate, catalog: CourseCatalog = Depends(get_course_catalog)):
    # Single inserts are not validated against the rest of the catalog
    catalog.insert(course.to_course())
    return {"message": "Course added successfully", "id": course.course_id}

# Get all courses in course number order
@router.get("/courses/", response_model=List[CourseResponse])
async def get_courses(catalog: CourseCatalog = Depends(get_course_catalog)):
    return [serialize_course(course) for course in catalog.enumerate()]

#Get course by ID
@router.get("/courses/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        course = catalog.search(course_id)
    except CourseNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())

    return serialize_course(course)

#Delete Course
@router.delete("/courses/{course_id}")
async def delete_course(course_id: str, catalog: CourseCatalog = Depends(get_course_catalog)):
    """Removes a course; removing an unknown course number changes nothing"""
    existed = catalog.contains(course_id)
    catalog.remove(course_id)

    if not existed:
        return {"message": f"Course {course_id} was not in the catalog"}
    return {"message": f"Course {course_id} has been deleted"}
