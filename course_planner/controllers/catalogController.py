from fastapi import APIRouter, HTTPException, Depends
import logging
from course_planner.catalog import CourseCatalog, get_course_catalog
from course_planner.models.Catalog import CatalogLoad, CatalogFileLoad, CatalogStatus
from course_planner.helpers.exceptions import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter()

# Replace the catalog with rows or raw lines sent in the request body
@router.post("/catalog/load")
async def load_catalog(payload: CatalogLoad, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        if payload.rows is not None:
            count = catalog.load(payload.rows)
        else:
            count = catalog.load_lines(payload.lines)
        return {"message": "Courses loaded successfully", "count": count}
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except HTTPException as e:
        raise e
    except Exception as e:
        logger.error(f"Error loading catalog: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

# Replace the catalog with the contents of a file on the server
@router.post("/catalog/load-file")
async def load_catalog_file(payload: CatalogFileLoad, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        count = catalog.load_file(payload.path)
        return {"message": "Courses loaded successfully", "count": count}
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except HTTPException as e:
        raise e
    except Exception as e:
        logger.error(f"Error loading catalog file {payload.path}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

@router.get("/catalog/status", response_model=CatalogStatus)
async def get_catalog_status(catalog: CourseCatalog = Depends(get_course_catalog)):
    return CatalogStatus(state=catalog.state.value, count=len(catalog), height=catalog.tree.height())

#Clear Catalog
@router.delete("/catalog/")
async def clear_catalog(catalog: CourseCatalog = Depends(get_course_catalog)):
    catalog.clear()
    return {"message": "Catalog cleared"}
