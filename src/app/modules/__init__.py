"""Feature modules: auth, users, students, teachers, courses."""
