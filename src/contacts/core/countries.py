#-------------------------------------------------------------------------bh-
# Common Imports:
from ..base import *
#-------------------------------------------------------------------------eh-


#-------------------------------------------------------------------------bm-
#----------------------------------------------------------------------------
class Country(Base, SessionMixin):
    """Countries a person may be associated with."""
    __tablename__ = 'Countries'

    country_id = Column('CountryID', Uuid, primary_key=True, default=uuid.uuid4)
    country_name = Column('CountryName', String(100))

    persons = relationship('Person', back_populates='country')

    @classmethod
    def get_by_country_id(cls, session, country_id) -> Optional['Country']:
        """
        Get a country by primary key.

        Returns:
            Country object if found, None otherwise
        """
        return session.get(cls, country_id)

    @classmethod
    def get_by_name(cls, session, country_name: str) -> Optional['Country']:
        """
        Get a country by exact (case-sensitive) name match.

        The SQL comparison follows the column collation, which is
        case-insensitive on a default MySQL install, so candidates are
        re-checked in Python.

        Example:
            >>> usa = Country.get_by_name(session, 'USA')
        """
        candidates = session.execute(
            select(cls).where(cls.country_name == country_name)
        ).scalars()
        return next((c for c in candidates if c.country_name == country_name), None)

    def __str__(self):
        return f"{self.country_name}"

    def __repr__(self):
        return f"<Country(country_id='{self.country_id}', country_name='{self.country_name}')>"
#-------------------------------------------------------------------------em-
