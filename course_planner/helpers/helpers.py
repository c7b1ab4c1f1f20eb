from typing import Iterable, List
from tabulate import tabulate

from course_planner.models.Courses import Course
from course_planner.helpers.exceptions import DataSourceError

def parse_course_line(line: str) -> List[str]:
    """Splits a raw `id,title[,prereq]*` line into its fields"""
    return line.rstrip("\r\n").split(",")

def read_course_lines(path: str) -> List[str]:
    """Reads the lines of a catalog file, raising DataSourceError when it can't be opened"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readlines()
    except OSError as e:
        raise DataSourceError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise DataSourceError(path, f"not valid UTF-8 ({e.reason})") from e

def serialize_course(course: Course):
    course_data = course.model_dump()
    course_data["prerequisites"] = list(course.prerequisites)
    return course_data

def format_course(course: Course) -> str:
    lines = [f"{course.course_id}: {course.title}"]
    if course.prerequisites:
        lines.append(f"Prerequisites: {', '.join(course.prerequisites)}")
    else:
        lines.append("No prerequisites.")
    return "\n".join(lines)

def format_course_table(courses: Iterable[Course]) -> str:
    headers = ["Course Number", "Title", "Prerequisites"]
    rows = []

    for course in courses:
        rows.append([
            course.course_id,
            course.title,
            ", ".join(course.prerequisites) or "None"
        ])

    return tabulate(rows, headers=headers, tablefmt="grid")
