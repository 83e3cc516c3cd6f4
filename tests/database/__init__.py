"""Database integration tests using real PostgreSQL via Testcontainers.

Covers:
- End-to-end seeding and idempotence
- Repository predicates compiled to PostgreSQL
"""
