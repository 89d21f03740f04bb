"""
Blog Backend - Application Package Initializer
===============================================

What: Marks the `blogapp` directory as a Python package.
Who:  Used by uvicorn (`blogapp.main:app`), Alembic and pytest.

Architecture Note:
    The backend is split into layers, top to bottom:

    ┌─────────────────────────────────────┐
    │     Pages + Views (HTML layer)      │  ← Jinja2 pages, per-request view state
    ├─────────────────────────────────────┤
    │      API Client (HTTP "fetch")      │  ← httpx calls to /api/posts
    ├─────────────────────────────────────┤
    │         Routes (API Layer)          │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Error mapping)      │  ← Store failures → tagged errors
    ├─────────────────────────────────────┤
    │        Store (Data access)          │  ← create / find / delete over SQLAlchemy
    ├─────────────────────────────────────┤
    │     Database (Persistence)          │  ← Async engine + sessions
    └─────────────────────────────────────┘

    Pages never touch the database directly: they go through the API client,
    so the browser-facing pages and any other HTTP consumer see the same API.
"""

__version__ = "1.0.0"
