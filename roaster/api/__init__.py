"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from roaster.api import app

    uvicorn roaster.api:app --reload
"""

from roaster.api.app import app, create_app

__all__ = ["app", "create_app"]
