import logging
import os
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from course_planner.models.Courses import Course
from course_planner.models.CourseTree import CourseTree
from course_planner.helpers.exceptions import (
    CatalogError, MalformedRowError, UnresolvedPrerequisiteError
)
from course_planner.helpers.helpers import parse_course_line, read_course_lines

LOG_LEVEL = os.getenv("COURSE_PLANNER_LOG_LEVEL", "INFO").upper()

# Set up logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

COURSE_DATA_FILE = os.getenv("COURSE_DATA_FILE")

class CatalogState(str, Enum):
    EMPTY = "Empty"
    LOADED = "Loaded"

class CourseCatalog:
    """Course tree plus the all-or-nothing loader that fills it.

    A load either leaves a fully validated catalog behind (every
    prerequisite names a loaded course) or an empty one. Single-course
    `insert` and `remove` skip validation and leave `state` untouched;
    `find_unresolved` re-checks the catalog after such edits.
    """

    def __init__(self):
        self.tree = CourseTree()
        self.state = CatalogState.EMPTY

    def __len__(self):
        return len(self.tree)

    def __iter__(self) -> Iterator[Course]:
        return self.tree.enumerate()

    def __contains__(self, course_id) -> bool:
        return self.tree.contains(course_id)

    @property
    def is_loaded(self) -> bool:
        return self.state == CatalogState.LOADED

    def clear(self):
        self.tree.clear()
        self.state = CatalogState.EMPTY

    def insert(self, course: Course):
        self.tree.insert(course)

    def remove(self, course_id: str):
        self.tree.remove(course_id)

    def search(self, course_id: str) -> Course:
        return self.tree.search(course_id)

    def contains(self, course_id: str) -> bool:
        return self.tree.contains(course_id)

    def enumerate(self) -> Iterator[Course]:
        return self.tree.enumerate()

    def load(self, rows: Iterable[Sequence[str]]) -> int:
        """Replace the catalog with `rows` and return the number of courses loaded.

        Each row is `[course_id, title, prereq...]`; empty prerequisite
        fields are skipped and a row without a course number counts as
        malformed. Raises MalformedRowError or
        UnresolvedPrerequisiteError; on any error the catalog is left empty.
        """
        self.clear()
        try:
            for row in rows:
                if len(row) < 2 or not row[0]:
                    raise MalformedRowError(row)
                prerequisites = [field for field in row[2:] if field]
                self.tree.insert(Course(course_id=row[0], title=row[1], prerequisites=prerequisites))

            self._validate_prerequisites()
        except CatalogError as e:
            logger.warning(f"{e.message}. Clearing catalog due to load failure")
            self.clear()
            raise
        except Exception as e:
            logger.error(f"Unexpected error loading catalog: {str(e)}. Clearing catalog")
            self.clear()
            raise

        self.state = CatalogState.LOADED
        logger.info(f"Loaded {len(self.tree)} courses")
        return len(self.tree)

    def load_lines(self, lines: Iterable[str]) -> int:
        return self.load(parse_course_line(line) for line in lines)

    def load_file(self, path: str) -> int:
        logger.info(f"Loading course data from {path}")
        self.clear()
        try:
            lines = read_course_lines(path)
        except CatalogError as e:
            logger.error(e.message)
            raise
        return self.load_lines(lines)

    def _validate_prerequisites(self):
        for course in self.tree.enumerate():
            for prereq_id in course.prerequisites:
                if not self.tree.contains(prereq_id):
                    raise UnresolvedPrerequisiteError(course.course_id, prereq_id)

    def find_unresolved(self) -> List[Tuple[str, str]]:
        """List (course_id, prerequisite_id) pairs whose prerequisite is missing"""
        return [
            (course.course_id, prereq_id)
            for course in self.tree.enumerate()
            for prereq_id in course.prerequisites
            if not self.tree.contains(prereq_id)
        ]

    def prerequisites_of(self, course_id: str) -> List[Course]:
        course = self.tree.search(course_id)
        return [self.tree.search(prereq_id) for prereq_id in course.prerequisites if self.tree.contains(prereq_id)]

    def dependents_of(self, course_id: str) -> List[Course]:
        return [course for course in self.tree.enumerate() if course_id in course.prerequisites]

course_catalog = CourseCatalog()

async def on_startup():
    if not COURSE_DATA_FILE:
        logger.info("COURSE_DATA_FILE not set, starting with an empty catalog")
        return
    try:
        count = course_catalog.load_file(COURSE_DATA_FILE)
        logger.info(f"Course catalog ready with {count} courses from {COURSE_DATA_FILE}")
    except CatalogError as e:
        # Don't crash the app, the catalog can still be loaded through the API
        logger.error(f"Failed to load course data: {e.message}")

async def on_shutdown():
    course_catalog.clear()
    logger.info("Cleared course catalog")

def get_course_catalog() -> CourseCatalog:
    return course_catalog

def configure(data_file: Optional[str] = None):
    """Overrides the catalog file loaded at startup"""
    global COURSE_DATA_FILE
    COURSE_DATA_FILE = data_file
