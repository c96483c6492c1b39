from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import InvalidInputError
from app.core.logging import get_logger
from app.models.match_db.match_crud import get_match, generate_matches_for_profile, list_matches_for_profile, \
    get_match_stats, update_match_status, regenerate_matches_for_profile, delete_matches_for_profile, \
    generate_all_matches
from app.models.profile_db.profile_crud import get_profile_by_id
from app.schemas.match.match_base import MatchOut, MatchListOut, MatchStats, MatchStatusUpdate, \
    MatchGenerationOut, MatchRegenerationOut, MatchDeletionOut, MatchBatchOut, ComparisonOut
from app.services.comparison import build_comparison


match_router = APIRouter(prefix="/matches", tags=["Matching"])
logger = get_logger(__name__)


@match_router.post("/generate-all", response_model=MatchBatchOut)
def generate_all(db: Session = Depends(get_db)):
    return generate_all_matches(db)


@match_router.post("/generate/{profile_id}", response_model=MatchGenerationOut)
def generate_matches(profile_id: UUID, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    matches = generate_matches_for_profile(db, profile)
    return MatchGenerationOut(
        profile_id=profile.id,
        matches_created=len(matches),
        match_ids=[m.id for m in matches],
    )


@match_router.post("/regenerate/{profile_id}", response_model=MatchRegenerationOut)
def regenerate_matches(profile_id: UUID, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    updated = regenerate_matches_for_profile(db, profile)
    return MatchRegenerationOut(profile_id=profile.id, matches_updated=updated)


@match_router.delete("/profile/{profile_id}", response_model=MatchDeletionOut)
def delete_matches(profile_id: UUID, db: Session = Depends(get_db)):
    if not get_profile_by_id(db, profile_id):
        raise HTTPException(status_code=404, detail="Profile not found")

    deleted = delete_matches_for_profile(db, profile_id)
    return MatchDeletionOut(profile_id=profile_id, matches_deleted=deleted)


@match_router.get("/", response_model=MatchListOut)
def list_matches(
    profile_id: UUID,
    sort: Literal["score", "date"] = Query("score"),
    order: Literal["asc", "desc"] = Query("desc"),
    db: Session = Depends(get_db)
):
    if not get_profile_by_id(db, profile_id):
        raise HTTPException(status_code=404, detail="Profile not found")

    matches = list_matches_for_profile(db, profile_id, sort=sort, order=order)
    return MatchListOut(matches=matches, total=len(matches))


@match_router.get("/stats/{profile_id}", response_model=MatchStats)
def match_stats(profile_id: UUID, db: Session = Depends(get_db)):
    if not get_profile_by_id(db, profile_id):
        raise HTTPException(status_code=404, detail="Profile not found")
    return get_match_stats(db, profile_id)


@match_router.get("/{match_id}", response_model=MatchOut)
def get_match_route(match_id: UUID, db: Session = Depends(get_db)):
    match = get_match(db, match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return match


@match_router.patch("/{match_id}/status", response_model=MatchOut)
def set_match_status(match_id: UUID, payload: MatchStatusUpdate, db: Session = Depends(get_db)):
    match = update_match_status(db, match_id, payload.status)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return match


@match_router.get("/{match_id}/comparison", response_model=ComparisonOut)
def get_comparison(match_id: UUID, user_id: UUID, db: Session = Depends(get_db)):
    match = get_match(db, match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")

    if user_id == match.user1_id:
        current_user, match_user = match.user1, match.user2
    elif user_id == match.user2_id:
        current_user, match_user = match.user2, match.user1
    else:
        raise HTTPException(status_code=400, detail="User is not part of this match")

    try:
        comparison = build_comparison(current_user, match_user, match)
    except InvalidInputError as e:
        logger.error("comparison_failed", match_id=str(match_id), field=e.field, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    return ComparisonOut.model_validate(comparison, from_attributes=True)
