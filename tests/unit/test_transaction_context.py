"""
management_transaction: commit on success, rollback and re-raise on error.
"""

import uuid

import pytest

from contacts.core import Country
from contacts.manage import management_transaction


class TestManagementTransaction:

    def test_commits_on_success(self, session, SessionFactory):
        with management_transaction(session, 'add country') as s:
            assert s is session
            s.add(Country(country_id=uuid.uuid4(), country_name='Chile'))

        other = SessionFactory()
        try:
            assert Country.get_by_name(other, 'Chile') is not None
        finally:
            other.close()

    def test_rolls_back_and_reraises(self, session):
        with pytest.raises(RuntimeError, match='boom'):
            with management_transaction(session, 'add country'):
                session.add(Country(country_id=uuid.uuid4(), country_name='Peru'))
                session.flush()
                raise RuntimeError('boom')

        assert Country.get_by_name(session, 'Peru') is None

    def test_logs_rollback(self, session, caplog):
        with caplog.at_level('WARNING', logger='contacts.manage.transaction'):
            with pytest.raises(ValueError):
                with management_transaction(session, 'bad change'):
                    raise ValueError('invalid')

        assert 'Rolled back bad change: invalid' in caplog.text
