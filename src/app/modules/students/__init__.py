"""
Students module - Student records and their CRUD endpoints.
"""

from app.modules.students.models import Student
from app.modules.students.repository import StudentRepository
from app.modules.students.router import router

__all__ = ["Student", "StudentRepository", "router"]
