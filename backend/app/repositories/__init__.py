# Repositories package init
"""
Project Backend — Repository Layer
====================================

What:  Typed query interface over the entity store collections.
Why:   Services ask for records by field equality; they never build queries.

Repository Inventory:
    - BaseRepository:    find_one_by / find_all_by / save / delete_by_id
    - UserRepository:    lookups by id + flag, email + flag, and flag
    - PackageRepository: lookup by id

Repositories are built once by app.assembly with the application's session
factory and handed to the services that use them.
"""
