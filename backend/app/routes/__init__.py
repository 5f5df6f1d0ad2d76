# Routes package init
"""
NoteKeeper Backend - API Routes Package
=========================================

Route Inventory:
    - notes.py:   /api/notes CRUD
    - health.py:  GET /health

Routes stay thin: parse the request, call NoteService, pick the status code.
"""
