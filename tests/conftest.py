#-------------------------------------------------------------------------bh-
# pytest configuration and fixtures for contacts tests
#-------------------------------------------------------------------------eh-

import pytest
import sys
import uuid
from datetime import date
from pathlib import Path

# Add project root and src to path for imports
PROJ_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJ_ROOT / 'src'))
sys.path.insert(0, str(PROJ_ROOT / 'tests'))

from contacts.base import Base
from contacts.session import create_contacts_engine


@pytest.fixture(scope='session')
def audit_log_path(tmp_path_factory):
    """Audit log shared by every app / session in the test run."""
    return tmp_path_factory.mktemp('audit') / 'model_audit.log'


@pytest.fixture(scope='session')
def engine():
    """In-memory SQLite engine shared by the whole test session."""
    engine, _ = create_contacts_engine('sqlite://')
    yield engine
    engine.dispose()


@pytest.fixture(scope='session')
def SessionFactory(engine):
    """Create a session factory for the test session."""
    from sqlalchemy.orm import sessionmaker
    return sessionmaker(bind=engine)


@pytest.fixture
def session(SessionFactory, engine):
    """
    Provide a session on freshly created tables.

    Services commit, so isolation comes from dropping the tables afterwards
    rather than from a rollback.
    """
    import contacts.core  # noqa: F401

    Base.metadata.create_all(engine)
    session = SessionFactory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(engine)


# Common service / data fixtures
@pytest.fixture
def countries_service(session):
    from contacts.services import CountriesService
    return CountriesService(session)


@pytest.fixture
def persons_service(session):
    from contacts.services import PersonsService
    return PersonsService(session)


@pytest.fixture
def usa(countries_service):
    """Stored country 'USA'."""
    from contacts.dto import CountryAddRequest
    return countries_service.add_country(CountryAddRequest(country_name='USA'))


@pytest.fixture
def india(countries_service):
    """Stored country 'India'."""
    from contacts.dto import CountryAddRequest
    return countries_service.add_country(CountryAddRequest(country_name='India'))


@pytest.fixture
def make_person_request():
    """Factory for valid add requests; keyword arguments override fields."""
    from contacts.dto import PersonAddRequest
    from contacts.enums import GenderOptions

    def make(**overrides):
        values = dict(
            person_name='Smith',
            email='smith@example.com',
            date_of_birth=date(1990, 5, 6),
            gender=GenderOptions.MALE,
            country_id=None,
            address='1 Main Street',
            receive_news_letters=True,
            tin='123-45-678',
        )
        values.update(overrides)
        return PersonAddRequest(**values)

    return make


@pytest.fixture
def sample_persons(persons_service, make_person_request, usa, india):
    """Three stored persons: Mary (USA), Smith (India), Rahman (no country)."""
    from contacts.enums import GenderOptions

    return [
        persons_service.add_person(make_person_request(
            person_name='Mary', email='mary@example.com', date_of_birth=date(2002, 5, 6),
            gender=GenderOptions.FEMALE, country_id=usa.country_id, address='Boston',
            receive_news_letters=False)),
        persons_service.add_person(make_person_request(
            person_name='Smith', email='smith@example.com', date_of_birth=date(1985, 1, 20),
            gender=GenderOptions.MALE, country_id=india.country_id, address='Chennai')),
        persons_service.add_person(make_person_request(
            person_name='Rahman', email='rahman@sample.org', date_of_birth=None,
            gender=GenderOptions.OTHER, country_id=None, address=None)),
    ]


# Flask fixtures
@pytest.fixture
def app(audit_log_path):
    """
    Create Flask app for testing.

    Each test gets its own in-memory database; the audit listener is
    registered once per process and writes to ``audit_log_path``.
    """
    from webapp.run import create_app

    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'AUDIT_LOG_PATH': str(audit_log_path),
    })
    yield app

    from webapp.extensions import db
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def app_session(app):
    """The app's request-scoped session, inside an app context."""
    from webapp.extensions import db
    with app.app_context():
        yield db.session


@pytest.fixture
def random_id():
    return uuid.uuid4()
