import uuid
from datetime import datetime
from sqlalchemy import Column, ForeignKey, Integer, String, Text, DateTime, JSON, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base


class Match(Base):
    __tablename__ = "matches"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user1_id = Column(Uuid(as_uuid=True), ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    user2_id = Column(Uuid(as_uuid=True), ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    overall_score = Column(Integer, nullable=False)
    category_scores = Column(JSON, nullable=False)  # { dimension key: 0-100 }
    status = Column(String, nullable=False, default="pending")

    # Written by the AI report subsystem, never by scoring
    compatibility_report = Column(Text, nullable=True)
    icebreakers = Column(JSON, default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user1 = relationship("UserProfile", foreign_keys=[user1_id])
    user2 = relationship("UserProfile", foreign_keys=[user2_id])

    __table_args__ = (
        UniqueConstraint("user1_id", "user2_id", name="unique_match_pair"),
    )
