"""School Management System API."""
