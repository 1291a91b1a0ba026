"""Integration tests.

- Run against an in-memory SQLite database (no external services)
- Each test gets a fresh engine with all tables created

Run:
    uv run pytest tests/integration/ -v
"""
