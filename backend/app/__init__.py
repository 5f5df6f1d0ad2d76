"""
NoteKeeper Backend - Application Package
========================================

What:  REST backend for a minimal note-taking app.
How:   Layered the usual FastAPI way:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, request/response shapes
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← trimming, validation, error mapping
    ├─────────────────────────────────────┤
    │       Note Store (Data Access)      │  ← ids, timestamps, ordering
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the database directly; they receive a NoteStore
    through FastAPI dependencies and hand it to the NoteService.
"""

__version__ = "1.0.0"
