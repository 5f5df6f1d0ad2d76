# Services package init
"""
NoteKeeper Backend - Services Layer
=====================================

Service Inventory:
    - NoteStore (abstract): data-access contract for notes
    - SQLAlchemyNoteStore: NoteStore over an async SQLAlchemy session
    - NoteService: validation, trimming and error mapping for the notes API
"""
