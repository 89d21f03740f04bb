# Services package init
"""
Blog Backend - Services Layer
==============================

What:  Logic between routes (HTTP) and the store (persistence).

Service Inventory:
    - PostService: post CRUD with store-failure → StoreError mapping
      and missing-row → NotFoundError conversion

Services are built per request by FastAPI dependencies
(`get_post_service`), around the store the request was given.
"""
