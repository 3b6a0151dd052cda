"""Infrastructure layer: adapters for the ports defined in ``src.domain``.

- **database**: Account persistence on PostgreSQL
- **cryptography**: Password hashing with bcrypt
- **validators**: E-mail syntax checking with email-validator
"""
