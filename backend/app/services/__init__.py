# Services package init
"""
Notes API - Services Layer
===========================

Business logic between the routes (HTTP) and the database (persistence).

Service Inventory:
    - NoteService: list/get/create/update/delete over the notes table
"""
