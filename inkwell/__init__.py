# Import all models to ensure they are registered with SQLModel
from inkwell.models import blog, page
from inkwell.core import config

__all__ = [
    "blog",
    "page",
    "config",
]
