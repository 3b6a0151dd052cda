"""Signup Service - account registration API.

Architecture Overview:
- **API Layer**: FastAPI routes, the signup controller and response rendering
- **Core Layer**: Configuration, logging, request context and error types
- **Domain Layer**: Account models, ports and the account creation use case
- **Infrastructure Layer**: bcrypt, email-validator and PostgreSQL adapters

The controller and use case depend only on the ports in ``src.domain``, so
each stage can be exercised with test doubles.
"""
