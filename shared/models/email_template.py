from sqlalchemy import Column, String, Text

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class EmailTemplate(SoftDeleteModel, Base):
    __tablename__ = "email_template"

    name = Column(String(255), unique=True, nullable=False)
    html = Column(Text, nullable=False)
    text = Column(Text, nullable=False)
