# Services package init
"""
Project Backend — Services Layer
==================================

What:  Business logic layer sitting between routes (HTTP) and repositories
       (persistence).
Why:   Routes handle HTTP, services handle business rules, repositories
       handle the store.

Service Inventory:
    - UserService:    registration, update, soft delete, listing
    - PackageService: create, replace, physical delete, read

Services receive their repositories in the constructor. app.assembly builds
them once per application and hands them to the router factories.
"""
