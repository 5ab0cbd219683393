# Routes package init
"""
Project Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each module exposes a build_*_router() factory taking the service (or
       engine) its handlers call, so routes never reach for globals.

Route Inventory:
    - users.py:    POST /user/create, GET /user/find-all, GET /user/find-by-id,
                   POST /user/update, DELETE /user/delete
    - packages.py: POST /package/create, POST /package/update,
                   DELETE /package/delete, GET /package/find-by-id
    - health.py:   GET /health

Design Principle:
    Routes should be THIN: extract parameters, call the service, return its
    result. Business logic belongs in services.
"""
