from pydantic import BaseModel, EmailStr, Field
from uuid import UUID
from typing import List, Optional
from datetime import datetime


class SocialHandles(BaseModel):
    instagram: Optional[str] = None
    snapchat: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None


class LifestyleSurvey(BaseModel):
    cleanliness: Optional[int] = Field(None, ge=1, le=5)
    social_level: Optional[int] = Field(None, ge=1, le=5)
    sleep_schedule: Optional[int] = Field(None, ge=1, le=5)
    guest_frequency: Optional[int] = Field(None, ge=1, le=5)
    smoking: Optional[bool] = None
    drinking: Optional[bool] = None
    pets: Optional[bool] = None
    interests: List[str] = []


class ProfileBase(LifestyleSurvey):
    name: str
    email: EmailStr
    bio: Optional[str] = None
    hometown: Optional[str] = None
    photo_url: Optional[str] = None
    social_handles: Optional[SocialHandles] = None


class ProfileCreate(ProfileBase):
    pass


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    bio: Optional[str] = None
    hometown: Optional[str] = None
    photo_url: Optional[str] = None
    social_handles: Optional[SocialHandles] = None


class ProfileOut(ProfileBase):
    id: UUID
    survey_completed: bool
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileTraitsOut(BaseModel):
    profile_id: UUID
    traits: List[str]
    interests: List[str]
