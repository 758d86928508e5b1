from fastapi import APIRouter

from app.modules.auth import router as auth_router
from app.modules.courses import router as courses_router
from app.modules.students import router as students_router
from app.modules.teachers import router as teachers_router
from app.modules.users.router import router as users_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(students_router, prefix="/students", tags=["Students"])
api_router.include_router(teachers_router, prefix="/teachers", tags=["Teachers"])
api_router.include_router(courses_router, prefix="/courses", tags=["Courses"])

# Older clients call /register and /login at the root and the protected
# resources under /auth. Served but left out of the OpenAPI schema.
legacy_router = APIRouter(include_in_schema=False)

legacy_router.include_router(auth_router)
legacy_router.include_router(users_router, prefix="/auth/users")
legacy_router.include_router(students_router, prefix="/auth/students")
legacy_router.include_router(teachers_router, prefix="/auth/teachers")
legacy_router.include_router(courses_router, prefix="/auth/courses")
