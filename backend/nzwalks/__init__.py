"""
NZWalks Backend — Application Package Initializer
==================================================

What: Marks the `nzwalks` directory as a Python package.
Who:  Imported by uvicorn (`nzwalks.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered so each concern can be swapped or tested alone:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP binding, status codes
    ├─────────────────────────────────────┤
    │   Services + Validation + Mapper    │  ← Orchestration and field rules
    ├─────────────────────────────────────┤
    │     Repositories (SQL / memory)     │  ← Storage contracts
    ├─────────────────────────────────────┤
    │  Models (SQLAlchemy) & Schemas      │  ← Domain rows / API contracts
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
