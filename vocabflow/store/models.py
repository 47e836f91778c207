"""
SQLAlchemy ORM models for the SQL Item Store.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class VocabItemRecord(Base):
    """
    Persistent row for a single vocabulary item.

    `seq` preserves insertion order: the highest seq is the newest item.
    List and dictionary fields are stored as JSON text.
    """
    __tablename__ = 'vocab_items'

    id = Column(String(64), primary_key=True, nullable=False)
    seq = Column(Integer, nullable=False, unique=True, index=True)

    # Content
    word = Column(String(255), nullable=False)
    user_meaning = Column(Text, nullable=False, default="")
    context_sentence = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    collocations = Column(Text, nullable=False, default="[]")  # JSON array
    dictionary_data = Column(Text, nullable=True)  # JSON object

    # Scheduling
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_reviewed = Column(DateTime(timezone=True), nullable=False)
    mastery_level = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<VocabItemRecord({self.id}, {self.word!r}, {self.mastery_level})>"
