# Routes package init
"""
Blog Post API — API Routes Package
====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - posts.py:   GET/POST /posts, GET/PUT/DELETE /posts/{id}
    - health.py:  GET /health (service health check)

Routes handle HTTP concerns only (path params, status codes, headers) and
delegate to PostService.
"""
