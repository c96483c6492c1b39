from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Body, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.models.profile_db.profile_db import UserProfile
from app.models.profile_db.profile_crud import create_profile, get_profile_by_id, get_profile_by_email, \
    update_profile, delete_profile, save_lifestyle_survey
from app.models.match_db.match_crud import generate_matches_for_profile, regenerate_matches_for_profile, \
    delete_matches_for_profile, get_match_stats
from app.schemas.common.page_response import PageResponse
from app.schemas.profile.profile_base import ProfileCreate, ProfileOut, ProfileUpdate, LifestyleSurvey, \
    ProfileTraitsOut
from app.services.interests import clean_interests
from app.services.traits import derive_traits


profile_router = APIRouter(prefix="/profiles", tags=["Profiles"])


@profile_router.post("/", response_model=ProfileOut)
def register_profile(profile: ProfileCreate, db: Session = Depends(get_db)):
    if get_profile_by_email(db, profile.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return create_profile(db, profile)


@profile_router.get("/{profile_id}", response_model=ProfileOut)
def get_profile(profile_id: UUID, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@profile_router.get("/", response_model=PageResponse[ProfileOut])
def list_profiles(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = db.query(UserProfile).count()
    profiles = db.query(UserProfile).order_by(UserProfile.created_at).offset(skip).limit(size).all()

    return PageResponse[ProfileOut](
        page=page,
        size=size,
        total=total,
        has_next=(page * size) < total,
        has_prev=page > 1,
        items=profiles
    )


@profile_router.put("/{profile_id}", response_model=ProfileOut)
def edit_profile(
    profile_id: UUID,
    updates: ProfileUpdate = Body(...),
    db: Session = Depends(get_db)
):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    if updates.email:
        existing = get_profile_by_email(db, updates.email)
        if existing and existing.id != profile.id:
            raise HTTPException(status_code=400, detail="Email already registered")

    return update_profile(db, profile_id, updates)


@profile_router.post("/{profile_id}/lifestyle-survey")
def submit_lifestyle_survey(profile_id: UUID, survey: LifestyleSurvey, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    first_submission = save_lifestyle_survey(db, profile, survey)

    matches_created = 0
    matches_updated = 0
    if first_submission:
        matches_created = len(generate_matches_for_profile(db, profile))
    else:
        matches_updated = regenerate_matches_for_profile(db, profile)
        matches_created = len(generate_matches_for_profile(db, profile))

    return {
        "profile": ProfileOut.model_validate(profile),
        "matches_created": matches_created,
        "matches_updated": matches_updated,
        "stats": get_match_stats(db, profile.id),
    }


@profile_router.get("/{profile_id}/traits", response_model=ProfileTraitsOut)
def get_profile_traits(profile_id: UUID, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    return ProfileTraitsOut(
        profile_id=profile.id,
        traits=derive_traits(profile),
        interests=clean_interests(profile.interests),
    )


@profile_router.delete("/{profile_id}", response_model=ProfileOut)
def delete_profile_route(profile_id: UUID, db: Session = Depends(get_db)):
    if not get_profile_by_id(db, profile_id):
        raise HTTPException(status_code=404, detail="Profile not found")

    delete_matches_for_profile(db, profile_id)
    return delete_profile(db, profile_id)
