"""
Courses module - Course records and their CRUD endpoints.
"""

from app.modules.courses.models import Course
from app.modules.courses.repository import CourseRepository
from app.modules.courses.router import router

__all__ = ["Course", "CourseRepository", "router"]
