# Routes package init
"""
Notes API — Routes Package
============================

Route Inventory:
    - notes.py:   GET    /api/notes          (list notes in creation order)
                  POST   /api/notes          (create a note)
                  DELETE /api/notes/{id}     (delete a note)
    - health.py:  GET    /health             (liveness check)

Routes stay thin: they extract request data, call the note store, and
return models. Error responses come from the handlers in main.py.
"""
