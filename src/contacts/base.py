#-------------------------------------------------------------------------bh-
#-------------------------------------------------------------------------eh-

import uuid
from datetime import date, datetime
from typing import List, Optional
from sqlalchemy import (
    Column, String, Date, Boolean, Uuid, ForeignKey, Index, select
)
from sqlalchemy.orm import relationship, declarative_base, Session


#-------------------------------------------------------------------------bm-
Base = declarative_base()


class SessionMixin:
    @property
    def session(self) -> Session:
        return Session.object_session(self)
#-------------------------------------------------------------------------em-
