"""
NZWalks Backend — API Routes Package
=====================================

Route Inventory:
    - regions.py:           /Regions            GET, POST
                            /Regions/{id}       GET, PUT, DELETE
    - walks.py:             /Walks              GET, POST
                            /Walks/{id}         GET, PUT, DELETE
    - walk_difficulties.py: /WalkDifficulties       GET, POST
                            /WalkDifficulties/{id}  GET, PUT, DELETE
    - health.py:            /health             GET

Routes are thin: bind the path and body, call the service, set the status
code and Location header. `{id}` uses Starlette's `uuid` convertor, so a
malformed id never matches a route and the client gets a plain 404.
"""
