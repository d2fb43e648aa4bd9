# Services package init
"""
Bookshelf — Services Layer
============================

Service Inventory:
    - BookService: pass-through CRUD on the book store (used by the REST service)
    - NoteService: one text file per note (used by the note CLI)

Services raise the exceptions in bookshelf.exceptions; the REST service and
the CLI each decide how those surface (HTTP status vs. message and exit code).
"""
