from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Tuple

class Course(BaseModel):
    """A catalog entry keyed by its course number"""
    model_config = ConfigDict(frozen=True)

    course_id: str = Field(..., min_length=1)
    title: str
    prerequisites: Tuple[str, ...] = ()

    @field_validator('prerequisites', mode='before')
    def validate_prerequisites(cls, v):
        if v is None:
            return ()
        return tuple(v)

class CourseCreate(BaseModel):
    course_id: str = Field(..., min_length=1)
    title: str
    prerequisites: Optional[List[str]] = []

    @field_validator('prerequisites')
    def drop_empty_prerequisites(cls, v):
        return [prereq for prereq in v or [] if prereq]

    def to_course(self) -> Course:
        return Course(course_id=self.course_id, title=self.title, prerequisites=self.prerequisites)

class CourseResponse(BaseModel):
    course_id: str
    title: str
    prerequisites: List[str]
