from .base import Base
from .author import Author
from .course import Course

__all__ = ["Base", "Author", "Course"]
