# Routes package init
"""
Notes API - Routes Package
===========================

Route Inventory:
    - notes.py:   GET/POST       /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - health.py:  GET            /health

Routes stay thin: they extract input, call NoteService and shape the
envelope. Status codes for failures come from the exception handlers.
"""
