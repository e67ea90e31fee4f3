#-------------------------------------------------------------------------bh-
# Common Imports:
from ..base import *
#-------------------------------------------------------------------------eh-


#-------------------------------------------------------------------------bm-
#----------------------------------------------------------------------------
class Person(Base, SessionMixin):
    """A person record, optionally associated with a country."""
    __tablename__ = 'Persons'

    __table_args__ = (
        Index('IX_Persons_CountryID', 'CountryID'),
    )

    person_id = Column('PersonID', Uuid, primary_key=True, default=uuid.uuid4)
    person_name = Column('PersonName', String(40))
    email = Column('Email', String(40))
    date_of_birth = Column('DateOfBirth', Date)
    gender = Column('Gender', String(10))
    country_id = Column('CountryID', Uuid, ForeignKey('Countries.CountryID'))
    address = Column('Address', String(200))
    receive_news_letters = Column('ReceiveNewsLetters', Boolean, nullable=False, default=False)
    tin = Column('TaxIdNumber', String(11))

    country = relationship('Country', back_populates='persons')

    # Columns overwritten by an update; identity is immutable
    MUTABLE_FIELDS = (
        'person_name', 'email', 'date_of_birth', 'gender',
        'country_id', 'address', 'receive_news_letters', 'tin',
    )

    @classmethod
    def get_by_person_id(cls, session, person_id) -> Optional['Person']:
        """
        Get a person by primary key.

        Returns:
            Person object if found, None otherwise
        """
        return session.get(cls, person_id)

    @property
    def country_name(self) -> Optional[str]:
        return self.country.country_name if self.country else None

    def __str__(self):
        return f"{self.person_name} <{self.email}>"

    def __repr__(self):
        return f"<Person(person_id='{self.person_id}', person_name='{self.person_name}')>"
#-------------------------------------------------------------------------em-
