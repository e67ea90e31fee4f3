"""
Flask extensions initialization.

This module holds Flask extension instances to avoid circular imports.
Extensions are initialized here but configured in the application factory.
"""

from flask_sqlalchemy import SQLAlchemy

from contacts.base import Base

# Shares the contacts metadata so db.create_all() builds Countries / Persons.
# Configured with app in create_app()
db = SQLAlchemy(metadata=Base.metadata)
