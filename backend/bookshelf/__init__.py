"""
Bookshelf — Package Initializer
=================================

Two independent programs share this package:

    ┌──────────────────────────────┐   ┌──────────────────────────────┐
    │  Note CLI (cli.py)           │   │  Book REST service (main.py) │
    ├──────────────────────────────┤   ├──────────────────────────────┤
    │  NoteService (text files)    │   │  Routes → BookService        │
    │                              │   │  Models & Schemas            │
    │                              │   │  Database (async SQLAlchemy) │
    └──────────────────────────────┘   └──────────────────────────────┘

    Shared: config.py, exceptions.py, logging_config.py

No data flows between the two programs.
"""

__version__ = "1.0.0"
