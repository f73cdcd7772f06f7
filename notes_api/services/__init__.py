# Services package init
"""
Notes API — Services Layer
============================

Service Inventory:
    - NoteStore: Ordered in-memory note collection (list / create / delete)

Services know nothing about HTTP; routes translate their results and
exceptions into responses.
"""
