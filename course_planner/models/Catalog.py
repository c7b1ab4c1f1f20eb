from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

class CatalogLoad(BaseModel):
    """Model for loading a catalog from field rows or raw lines"""
    rows: Optional[List[List[str]]] = None
    lines: Optional[List[str]] = None

    @model_validator(mode='after')
    def validate_source(self):
        if (self.rows is None) == (self.lines is None):
            raise ValueError('Provide exactly one of rows or lines')
        return self

class CatalogFileLoad(BaseModel):
    path: str = Field(..., min_length=1)

class CatalogStatus(BaseModel):
    state: str
    count: int
    height: int

class UnresolvedPrerequisite(BaseModel):
    course_id: str
    prerequisite_id: str

class CatalogValidation(BaseModel):
    valid: bool
    unresolved: List[UnresolvedPrerequisite] = []
