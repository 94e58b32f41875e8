# authapi/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Relational database configuration and connection management
- errors: Client-facing error taxonomy
- security: Password hashing and JWT tokens
"""
