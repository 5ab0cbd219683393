"""
Project Backend — Application Package
=======================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │        Routes (Controller Layer)    │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services + Validation (Logic)    │  ← Business rules, in-band errors
    ├─────────────────────────────────────┤
    │      Repositories (Query Layer)     │  ← Field-equality lookups, saves
    ├─────────────────────────────────────┤
    │   Models + Database (Entity Store)  │  ← Async SQLAlchemy
    └─────────────────────────────────────┘

    app.assembly wires the layers together explicitly; nothing below the
    routes knows about HTTP.
"""

__version__ = "1.0.0"
