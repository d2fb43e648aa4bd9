# Routes package init
"""
Bookshelf — API Routes Package
================================

Route Inventory:
    - books.py:   POST   /books             (create)
                  GET    /books             (list all)
                  PUT    /books/{book_id}   (partial update)
                  DELETE /books/{book_id}   (delete)
    - health.py:  GET    /health            (service health check)

Routes stay thin: extract the body or path parameter, call BookService,
set the status code.
"""
