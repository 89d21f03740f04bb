# Routes package init
"""
Blog Backend - Routes Package
==============================

Route Inventory:
    - posts.py:   /api/posts, /api/posts/{id}   (JSON API)
    - pages.py:   /, /posts, /posts/{id}, /create-post   (HTML pages)
    - health.py:  GET /health   (service health check)

Routes stay thin: they extract request data, call a service or view,
and pick the status code. Error formatting lives in main.py.
"""
