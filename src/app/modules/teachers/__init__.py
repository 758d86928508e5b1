"""
Teachers module - Teacher records and their CRUD endpoints.
"""

from app.modules.teachers.models import Teacher
from app.modules.teachers.repository import TeacherRepository
from app.modules.teachers.router import router

__all__ = ["Teacher", "TeacherRepository", "router"]
