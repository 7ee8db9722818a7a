# Services package init
"""
Blog Post API — Services Layer
================================

Service Inventory:
    - PostStore (abstract): Interface over the post document collection
    - SQLAlchemyPostStore: Concrete store using async SQLAlchemy
    - PostService: Resource handler for the /posts endpoints
"""
