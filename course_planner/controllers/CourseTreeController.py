from fastapi import APIRouter, HTTPException, Depends
from course_planner.catalog import CourseCatalog, get_course_catalog
from course_planner.models.Catalog import CatalogValidation, UnresolvedPrerequisite
from course_planner.helpers.exceptions import CourseNotFoundError
from course_planner.helpers.helpers import serialize_course

router = APIRouter()

# Re-check prerequisites after single course inserts and deletes
@router.get("/course-tree/validate", response_model=CatalogValidation)
async def validate_catalog(catalog: CourseCatalog = Depends(get_course_catalog)):
    unresolved = [
        UnresolvedPrerequisite(course_id=course_id, prerequisite_id=prereq_id)
        for course_id, prereq_id in catalog.find_unresolved()
    ]
    return CatalogValidation(valid=not unresolved, unresolved=unresolved)

# Get a course with its prerequisite courses and the courses that depend on it
@router.get("/course-tree/{course_id}")
async def get_course_prerequisites(course_id: str, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        course_data = serialize_course(catalog.search(course_id))
        course_data["prerequisites_detail"] = [
            serialize_course(prereq) for prereq in catalog.prerequisites_of(course_id)
        ]
        course_data["subsequent_courses"] = [
            serialize_course(dependent) for dependent in catalog.dependents_of(course_id)
        ]
        return course_data
    except CourseNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
