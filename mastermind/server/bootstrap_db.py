"""
Dev convenience: create tables if they don't exist.
Called at startup when APP_ENV=local.
"""

from .db import engine, Base
from . import models  # noqa: F401  (registers the tables on Base.metadata)

def create_all():
    Base.metadata.create_all(bind=engine)
