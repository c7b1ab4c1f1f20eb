from typing import Sequence

class CatalogError(Exception):
    """Base exception for catalog errors"""
    kind = "CatalogError"

    def __init__(self, message: str):
        self.message = message
        self.detail = message
        super().__init__(self.message)

    def to_dict(self):
        return {"kind": self.kind, "detail": self.detail}

class CourseNotFoundError(CatalogError):
    """Exception for a course number missing from the catalog"""
    kind = "NotFound"

    def __init__(self, course_id: str):
        self.course_id = course_id
        super().__init__(f"Course not found, ID={course_id}")

class MalformedRowError(CatalogError):
    """Exception for a data row with fewer than two fields"""
    kind = "MalformedRow"

    def __init__(self, row: Sequence[str]):
        self.row = list(row)
        super().__init__(f"Invalid course data format in line: {','.join(self.row)}")

class UnresolvedPrerequisiteError(CatalogError):
    """Exception for a prerequisite that names a course outside the catalog"""
    kind = "UnresolvedPrerequisite"

    def __init__(self, course_id: str, prerequisite_id: str):
        self.course_id = course_id
        self.prerequisite_id = prerequisite_id
        super().__init__(f"Prerequisite {prerequisite_id} for course {course_id} not found")

class DataSourceError(CatalogError):
    """Exception for a catalog file that cannot be read"""
    kind = "DataSourceUnavailable"

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Could not open file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
