#!/usr/bin/env python3
import logging
import os

from flask import Flask, redirect, url_for

import contacts.session
from contacts.session import engine_options_for

from webapp.extensions import db
from webapp.audit import init_audit
from webapp.persons.blueprint import bp as persons_bp
from webapp.countries.blueprint import bp as countries_bp
from webapp.api.v1.persons import bp as api_persons_bp
from webapp.api.v1.countries import bp as api_countries_bp

logger = logging.getLogger(__name__)


def _env_flag(name, default='false'):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


def create_app(test_config=None):
    """
    Build the contacts web application.

    Args:
        test_config: Optional mapping applied over the environment-derived
            configuration before extensions are initialized
    """
    app = Flask(__name__)

    # Flask configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret-key-change-this-in-production')

    # Flask-SQLAlchemy configuration
    app.config['SQLALCHEMY_DATABASE_URI'] = contacts.session.connection_string
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Application settings
    app.config['AUDIT_LOG_PATH'] = os.getenv('AUDIT_LOG_PATH', '/var/log/contacts/model_audit.log')
    app.config['EXCEL_EXPORT_BRIEF'] = _env_flag('EXCEL_EXPORT_BRIEF')
    app.config['CREATE_SCHEMA'] = True

    if test_config:
        app.config.update(test_config)

    if 'SQLALCHEMY_ENGINE_OPTIONS' not in app.config:
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = engine_options_for(app.config['SQLALCHEMY_DATABASE_URI'])

    # Initialize db with app
    db.init_app(app)

    # Audit trail for Country / Person changes
    init_audit(app)

    # Register teardown handler for automatic session cleanup
    @app.teardown_appcontext
    def shutdown_session(exception=None):
        db.session.remove()

    # Register blueprints
    app.register_blueprint(persons_bp)
    app.register_blueprint(countries_bp)

    # Register API blueprints
    app.register_blueprint(api_persons_bp, url_prefix='/api/v1/persons')
    app.register_blueprint(api_countries_bp, url_prefix='/api/v1/countries')

    if app.config['CREATE_SCHEMA']:
        with app.app_context():
            db.create_all()

    # Home page redirect
    @app.route('/')
    def index():
        return redirect(url_for('persons.index'))

    logger.debug("Contacts app created (database: %s)", app.config['SQLALCHEMY_DATABASE_URI'])
    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True, port=5050)
