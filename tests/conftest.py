import pytest
from fastapi.testclient import TestClient

from course_planner.app import app
from course_planner.catalog import CourseCatalog, get_course_catalog


SAMPLE_LINES = [
    "CSCI100,Introduction to Computer Science\n",
    "CSCI101,Introduction to Programming in C++,CSCI100\n",
    "CSCI200,Data Structures,CSCI101\n",
    "MATH201,Discrete Mathematics\n",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n",
    "CSCI301,Advanced Programming in C++,CSCI101\n",
    "CSCI350,Operating Systems,CSCI300\n",
    "CSCI400,Large Software Development,CSCI301,CSCI350\n",
]


@pytest.fixture
def catalog():
    return CourseCatalog()


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text("".join(SAMPLE_LINES), encoding="utf-8")
    return path


@pytest.fixture
def loaded_catalog(catalog):
    catalog.load_lines(SAMPLE_LINES)
    return catalog


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_course_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
