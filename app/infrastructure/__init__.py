"""
Infrastructure layer for the task board API.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy, async sessions)
- Authentication (JWT via python-jose, bcrypt password hashing)
- Rate limiting and HTTP middleware

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
