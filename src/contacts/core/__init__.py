from .countries import Country
from .persons import Person

__all__ = ['Country', 'Person']
