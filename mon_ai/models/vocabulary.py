from sqlalchemy import Column, String, Text
from mon_ai.models.base import BaseModel

class Vocabulary(BaseModel):
    __tablename__ = "vocabulary"

    word = Column(String(255), unique=True, nullable=False)  # always lowercase
    translation = Column(Text, nullable=False)
