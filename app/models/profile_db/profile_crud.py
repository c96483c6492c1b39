from uuid import UUID
from sqlalchemy.orm import Session
from app.models.profile_db.profile_db import UserProfile
from app.schemas.profile.profile_base import ProfileCreate, ProfileUpdate, LifestyleSurvey


SURVEY_FIELDS = tuple(LifestyleSurvey.model_fields)


def create_profile(db: Session, profile: ProfileCreate):
    db_profile = UserProfile(
        name=profile.name,
        email=profile.email,
        bio=profile.bio,
        hometown=profile.hometown,
        photo_url=profile.photo_url,
        social_handles=profile.social_handles.model_dump() if profile.social_handles else None,
        **{field: getattr(profile, field) for field in SURVEY_FIELDS},
    )
    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile


def get_profile_by_id(db: Session, profile_id: UUID):
    return db.query(UserProfile).filter(UserProfile.id == profile_id).first()


def get_profile_by_email(db: Session, email: str):
    return db.query(UserProfile).filter(UserProfile.email == email).first()


def update_profile(db: Session, profile_id: UUID, updates: ProfileUpdate):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        return None

    profile.name = updates.name or profile.name
    profile.email = updates.email or profile.email
    profile.bio = updates.bio or profile.bio
    profile.hometown = updates.hometown or profile.hometown
    profile.photo_url = updates.photo_url or profile.photo_url
    profile.social_handles = updates.social_handles.model_dump() if updates.social_handles else profile.social_handles

    db.commit()
    db.refresh(profile)
    return profile


def save_lifestyle_survey(db: Session, profile: UserProfile, survey: LifestyleSurvey) -> bool:
    """Store the survey answers. Returns True when this is the profile's first submission."""
    first_submission = not profile.survey_completed

    for field in SURVEY_FIELDS:
        setattr(profile, field, getattr(survey, field))
    profile.survey_completed = True

    db.commit()
    db.refresh(profile)
    return first_submission


def delete_profile(db: Session, profile_id: UUID):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        return None
    db.delete(profile)
    db.commit()
    return profile
