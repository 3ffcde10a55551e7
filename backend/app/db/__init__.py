"""Database metadata: SQLAlchemy Base shared by ORM models and migrations.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - aiosqlite for SQLite, asyncpg for PostgreSQL
"""
