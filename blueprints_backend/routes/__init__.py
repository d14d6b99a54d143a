"""Route blueprints package for API endpoints.

Contains the Flask blueprints for each route group: the blueprints CRUD
endpoints and the API docs. Each module documents its endpoint
responsibilities and JSON contracts.
"""
