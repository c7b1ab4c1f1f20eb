"""
Backend Starter Script

Starts the FastAPI backend for the Course Planner with uvicorn. An optional
catalog file can be passed as the first argument; it is loaded on startup.
"""
import os
import sys
import uvicorn

from course_planner import catalog

HOST = os.getenv("COURSE_PLANNER_HOST", "127.0.0.1")
PORT = int(os.getenv("COURSE_PLANNER_PORT", "8000"))

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    print("=" * 50)
    print("Course Planner Backend Starter")
    print("=" * 50)

    if argv:
        catalog.configure(argv[0])
        print(f"Course data file: {argv[0]}")

    print(f"Starting FastAPI server on http://{HOST}:{PORT}")
    uvicorn.run("course_planner.app:app", host=HOST, port=PORT, log_level=catalog.LOG_LEVEL.lower())
    print("Server has stopped.")

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nServer stopped by user.")
