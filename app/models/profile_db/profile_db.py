import uuid
from sqlalchemy import Column, String, Boolean, Integer, DateTime, Text, JSON, Uuid
from app.core.database import Base
from datetime import datetime


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    bio = Column(Text, nullable=True)
    hometown = Column(String, nullable=True)
    photo_url = Column(Text, nullable=True)
    social_handles = Column(JSON, nullable=True)  # { instagram, snapchat, facebook, linkedin }

    # Lifestyle survey, 1-5 scale
    cleanliness = Column(Integer, nullable=True)
    social_level = Column(Integer, nullable=True)
    sleep_schedule = Column(Integer, nullable=True)
    guest_frequency = Column(Integer, nullable=True)

    smoking = Column(Boolean, nullable=True)
    drinking = Column(Boolean, nullable=True)
    pets = Column(Boolean, nullable=True)

    interests = Column(JSON, default=list)
    survey_completed = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
