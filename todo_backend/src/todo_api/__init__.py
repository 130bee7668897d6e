"""
In-memory Todo API package.

The FastAPI application lives in 'todo_api.main' (importable as
'todo_api.main:app'); 'todo_api.main.create_app' builds fresh instances.
"""

__version__ = "1.0.0"
