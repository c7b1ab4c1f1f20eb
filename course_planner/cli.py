"""
Course Planner Menu

Interactive text menu over a course catalog:

    1. Load Data
    2. Print Alphanumeric List of All Courses
    3. Print Course Information
    9. Exit

Listing and lookup are only offered once a load has succeeded.
"""

import sys
from course_planner.catalog import CourseCatalog, COURSE_DATA_FILE
from course_planner.helpers.exceptions import CatalogError, CourseNotFoundError
from course_planner.helpers.helpers import format_course, format_course_table

MENU = """
1. Load Data
2. Print Alphanumeric List of All Courses
3. Print Course Information
9. Exit
"""

NOT_LOADED_MESSAGE = "No courses have been loaded. Please load data first."

class PlannerSession:
    def __init__(self, catalog: CourseCatalog = None, input_func=None):
        self.catalog = catalog if catalog is not None else CourseCatalog()
        self.input = input_func or input
        self.running = True

    def load_data(self, filename: str):
        try:
            count = self.catalog.load_file(filename)
        except CatalogError as e:
            print(e.message)
            return
        print(f"{count} courses loaded successfully.")

    def print_all_courses(self):
        if not self.catalog.is_loaded:
            print(NOT_LOADED_MESSAGE)
            return
        print(format_course_table(self.catalog.enumerate()))

    def print_course(self, course_id: str):
        try:
            course = self.catalog.search(course_id.strip())
        except CourseNotFoundError as e:
            print(e.message)
            return
        print(format_course(course))

    def handle(self, choice: str):
        try:
            option = int(choice)
        except ValueError:
            print("Invalid input. Please enter a number.")
            return

        if option == 1:
            self.load_data(self.input("Enter the file name: ").strip())
        elif option == 2:
            self.print_all_courses()
        elif option == 3:
            if not self.catalog.is_loaded:
                print(NOT_LOADED_MESSAGE)
                return
            self.print_course(self.input("Enter the course number: "))
        elif option == 9:
            print("Thank you for using the course planner!")
            self.running = False
        else:
            print("Invalid choice. Please try again.")

    def run(self):
        print("Welcome to the course planner.")
        while self.running:
            print(MENU)
            try:
                choice = self.input("What would you like to do? ")
            except EOFError:
                break
            self.handle(choice.strip())

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    session = PlannerSession()

    data_file = argv[0] if argv else COURSE_DATA_FILE
    if data_file:
        session.load_data(data_file)

    try:
        session.run()
    except KeyboardInterrupt:
        print("\nGoodbye.")

if __name__ == "__main__":
    main()
