"""
Blog Post API — Application Package
=====================================

Layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     PostService (Resource Handler)  │  ← validation, response shaping
    ├─────────────────────────────────────┤
    │       PostStore (Store Adapter)     │  ← insert/find/update/delete/count
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
