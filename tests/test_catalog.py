"""
Tests for loading and validating a course catalog.

A load must be all-or-nothing: every failure leaves an empty catalog.
"""

import pytest
from pydantic import ValidationError

from course_planner.catalog import CatalogState
from course_planner.models.Courses import Course
from course_planner.helpers.exceptions import (
    CourseNotFoundError,
    DataSourceError,
    MalformedRowError,
    UnresolvedPrerequisiteError,
)


def ids(catalog):
    return [course.course_id for course in catalog.enumerate()]


# ============================================================================
# Successful loads
# ============================================================================

class TestLoad:

    def test_load_success(self, catalog):
        count = catalog.load_lines(["CS101,Intro to CS,", "CS201,Data Structures,CS101"])

        assert count == 2
        course = catalog.search("CS201")
        assert course.title == "Data Structures"
        assert list(course.prerequisites) == ["CS101"]
        assert ids(catalog) == ["CS101", "CS201"]
        assert catalog.state == CatalogState.LOADED
        assert catalog.is_loaded

    def test_load_rows(self, catalog):
        catalog.load([["CS300", "Algorithms", "CS200"], ["CS200", "Data Structures"]])

        assert ids(catalog) == ["CS200", "CS300"]
        assert catalog.search("CS200").prerequisites == ()

    def test_empty_prerequisite_fields_are_skipped(self, catalog):
        catalog.load([
            ["CS100", "Intro"],
            ["MATH100", "Calculus"],
            ["CS200", "Next", "", "CS100", "", "MATH100", ""],
        ])

        assert catalog.search("CS200").prerequisites == ("CS100", "MATH100")

    def test_prerequisite_order_is_kept(self, loaded_catalog):
        assert loaded_catalog.search("CSCI400").prerequisites == ("CSCI301", "CSCI350")

    def test_crlf_line_endings(self, catalog):
        catalog.load_lines(["CS100,Intro\r\n", "CS200,Next,CS100\r\n"])

        assert catalog.search("CS200").prerequisites == ("CS100",)

    def test_load_file(self, catalog, course_file):
        count = catalog.load_file(str(course_file))

        assert count == 8
        assert ids(catalog)[0] == "CSCI100"
        assert ids(catalog)[-1] == "MATH201"

    def test_empty_source_loads_empty_catalog(self, catalog):
        assert catalog.load([]) == 0
        assert catalog.state == CatalogState.LOADED
        assert len(catalog) == 0

    def test_reload_replaces_previous_catalog(self, loaded_catalog):
        loaded_catalog.load_lines(["CS101,Intro"])

        assert ids(loaded_catalog) == ["CS101"]

    def test_duplicate_rows_are_kept(self, catalog):
        catalog.load_lines(["CS101,First", "CS101,Second"])

        assert len(catalog) == 2
        assert catalog.search("CS101").title == "First"

    def test_large_sorted_load(self, catalog):
        rows = [[f"C{i:05d}", f"Course {i}"] + ([f"C{i - 1:05d}"] if i else []) for i in range(2000)]

        assert catalog.load(rows) == 2000
        assert catalog.tree.height() == 2000


# ============================================================================
# Failed loads
# ============================================================================

class TestLoadFailures:

    def test_unresolved_prerequisite_leaves_catalog_empty(self, catalog):
        with pytest.raises(UnresolvedPrerequisiteError) as exc_info:
            catalog.load_lines(["CS101,Intro,CS050"])

        error = exc_info.value
        assert error.kind == "UnresolvedPrerequisite"
        assert error.course_id == "CS101"
        assert error.prerequisite_id == "CS050"
        assert "CS050" in error.detail and "CS101" in error.detail
        assert list(catalog.enumerate()) == []
        with pytest.raises(CourseNotFoundError):
            catalog.search("CS101")
        assert catalog.state == CatalogState.EMPTY

    def test_malformed_row_leaves_catalog_empty(self, catalog):
        with pytest.raises(MalformedRowError) as exc_info:
            catalog.load_lines(["CS100,Intro", "CS101"])

        assert exc_info.value.kind == "MalformedRow"
        assert exc_info.value.row == ["CS101"]
        assert "CS101" in exc_info.value.detail
        assert len(catalog) == 0
        assert catalog.state == CatalogState.EMPTY

    def test_blank_line_is_malformed(self, catalog):
        with pytest.raises(MalformedRowError):
            catalog.load_lines(["CS100,Intro\n", "\n"])
        assert len(catalog) == 0

    def test_missing_course_number_is_malformed(self, catalog):
        with pytest.raises(MalformedRowError):
            catalog.load([["", "No number"]])
        assert len(catalog) == 0

    def test_failed_load_discards_previous_catalog(self, loaded_catalog):
        with pytest.raises(UnresolvedPrerequisiteError):
            loaded_catalog.load_lines(["CS101,Intro,CS050"])

        assert len(loaded_catalog) == 0
        assert not loaded_catalog.contains("CSCI100")
        assert loaded_catalog.state == CatalogState.EMPTY

    def test_first_unresolved_in_course_order_is_reported(self, catalog):
        with pytest.raises(UnresolvedPrerequisiteError) as exc_info:
            catalog.load_lines(["CS300,Algorithms,CS999", "CS100,Intro,CS050"])

        assert exc_info.value.course_id == "CS100"

    def test_invalid_field_value_leaves_catalog_empty(self, loaded_catalog):
        with pytest.raises(ValidationError):
            loaded_catalog.load([["CS101", "Intro"], ["CS102", None]])

        assert len(loaded_catalog) == 0
        assert list(loaded_catalog.enumerate()) == []
        assert loaded_catalog.state == CatalogState.EMPTY

    def test_failing_row_source_leaves_catalog_empty(self, catalog):
        def rows():
            yield ["CS101", "Intro"]
            raise RuntimeError("source went away")

        with pytest.raises(RuntimeError):
            catalog.load(rows())

        assert len(catalog) == 0
        assert not catalog.contains("CS101")

    def test_undecodable_file(self, loaded_catalog, tmp_path):
        latin1_file = tmp_path / "latin1.csv"
        latin1_file.write_bytes(b"CS101,Caf\xe9 Culture\n")

        with pytest.raises(DataSourceError) as exc_info:
            loaded_catalog.load_file(str(latin1_file))

        assert "not valid UTF-8" in exc_info.value.message
        assert len(loaded_catalog) == 0
        assert loaded_catalog.state == CatalogState.EMPTY

    def test_missing_file(self, loaded_catalog, tmp_path):
        missing = tmp_path / "missing.csv"

        with pytest.raises(DataSourceError) as exc_info:
            loaded_catalog.load_file(str(missing))

        assert exc_info.value.kind == "DataSourceUnavailable"
        assert exc_info.value.path == str(missing)
        assert len(loaded_catalog) == 0
        assert loaded_catalog.state == CatalogState.EMPTY


# ============================================================================
# Single-course edits and queries
# ============================================================================

class TestCatalogQueries:

    def test_insert_and_remove_skip_validation(self, loaded_catalog):
        loaded_catalog.insert(Course(course_id="CS999", title="Orphan", prerequisites=["NOPE100"]))

        assert loaded_catalog.contains("CS999")
        assert loaded_catalog.state == CatalogState.LOADED
        assert loaded_catalog.find_unresolved() == [("CS999", "NOPE100")]

    def test_remove_breaks_links_without_error(self, loaded_catalog):
        loaded_catalog.remove("CSCI100")

        assert loaded_catalog.find_unresolved() == [("CSCI101", "CSCI100")]

    def test_find_unresolved_on_valid_catalog(self, loaded_catalog):
        assert loaded_catalog.find_unresolved() == []

    def test_prerequisites_of(self, loaded_catalog):
        titles = [course.title for course in loaded_catalog.prerequisites_of("CSCI300")]

        assert titles == ["Data Structures", "Discrete Mathematics"]

    def test_prerequisites_of_missing_course(self, loaded_catalog):
        with pytest.raises(CourseNotFoundError):
            loaded_catalog.prerequisites_of("CSCI999")

    def test_dependents_of(self, loaded_catalog):
        dependents = [course.course_id for course in loaded_catalog.dependents_of("CSCI101")]

        assert dependents == ["CSCI200", "CSCI301"]

    def test_clear_is_idempotent(self, loaded_catalog):
        loaded_catalog.clear()
        loaded_catalog.clear()

        assert len(loaded_catalog) == 0
        assert loaded_catalog.state == CatalogState.EMPTY
