from .course_library_repo import NIL_UUID, CourseLibraryRepository

__all__ = ["NIL_UUID", "CourseLibraryRepository"]
