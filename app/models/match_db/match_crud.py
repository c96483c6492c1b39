from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError
from app.core.logging import get_logger
from app.models.match_db.match_db import Match
from app.models.profile_db.profile_db import UserProfile
from app.schemas.match.match_base import MatchBatchOut, MatchStats, MatchStatus, MatchSummary
from app.services.compatibility import round_half_up
from app.services.comparison import score_pair
from app.services.traits import derive_traits

logger = get_logger(__name__)

HIGH_MATCH_SCORE = 80
MEDIUM_MATCH_SCORE = 60


def get_match(db: Session, match_id: UUID) -> Optional[Match]:
    return db.query(Match).filter(Match.id == match_id).first()


def get_matches_for_profile(db: Session, profile_id: UUID) -> List[Match]:
    return db.query(Match).filter(
        or_(Match.user1_id == profile_id, Match.user2_id == profile_id)
    ).all()


def find_match_between(db: Session, profile_a_id: UUID, profile_b_id: UUID) -> Optional[Match]:
    return db.query(Match).filter(
        or_(
            and_(Match.user1_id == profile_a_id, Match.user2_id == profile_b_id),
            and_(Match.user1_id == profile_b_id, Match.user2_id == profile_a_id),
        )
    ).first()


def create_match(db: Session, profile_a: UserProfile, profile_b: UserProfile) -> Match:
    # Pairs are stored with the smaller id first so (A, B) and (B, A) hit the same unique key
    first, second = sorted((profile_a, profile_b), key=lambda p: p.id)
    overall_score, category_scores = score_pair(first, second)
    match = Match(
        user1_id=first.id,
        user2_id=second.id,
        overall_score=overall_score,
        category_scores=category_scores,
        status=MatchStatus.pending.value,
        icebreakers=[],
    )
    db.add(match)
    db.commit()
    db.refresh(match)
    return match


def generate_matches_for_profile(db: Session, profile: UserProfile) -> List[Match]:
    """
    Pair a profile with every other profile it has no match with yet.

    A pair whose survey data cannot be scored, or whose insert fails, is
    logged and skipped; the remaining pairs are still created.
    """
    log = logger.bind(profile_id=str(profile.id))
    others = db.query(UserProfile).filter(UserProfile.id != profile.id).all()
    log.info("match_generation_start", candidates=len(others))

    created = []
    for other in others:
        if find_match_between(db, profile.id, other.id):
            continue

        try:
            match = create_match(db, profile, other)
        except InvalidInputError as e:
            log.warning("match_generation_skipped", other_id=str(other.id), field=e.field, error=str(e))
            continue
        except SQLAlchemyError as e:
            db.rollback()
            log.warning("match_insert_failed", other_id=str(other.id), error=str(e))
            continue

        created.append(match)
        log.info("match_created", match_id=str(match.id), other_id=str(other.id), score=match.overall_score)

    log.info("match_generation_complete", created=len(created))
    return created


def regenerate_matches_for_profile(db: Session, profile: UserProfile) -> int:
    """Recompute the stored scores of every existing match of a profile."""
    log = logger.bind(profile_id=str(profile.id))
    updated = 0

    for match in get_matches_for_profile(db, profile.id):
        try:
            overall_score, category_scores = score_pair(match.user1, match.user2)
        except InvalidInputError as e:
            log.warning("match_regeneration_skipped", match_id=str(match.id), field=e.field, error=str(e))
            continue

        match.overall_score = overall_score
        match.category_scores = category_scores
        match.updated_at = datetime.utcnow()
        updated += 1

    db.commit()
    log.info("match_regeneration_complete", updated=updated)
    return updated


def delete_matches_for_profile(db: Session, profile_id: UUID) -> int:
    deleted = db.query(Match).filter(
        or_(Match.user1_id == profile_id, Match.user2_id == profile_id)
    ).delete(synchronize_session=False)
    db.commit()
    logger.info("matches_deleted", profile_id=str(profile_id), deleted=deleted)
    return deleted


def update_match_status(db: Session, match_id: UUID, status: MatchStatus) -> Optional[Match]:
    match = get_match(db, match_id)
    if not match:
        return None

    match.status = status.value
    db.commit()
    db.refresh(match)
    return match


def get_match_stats(db: Session, profile_id: UUID) -> MatchStats:
    scores = [m.overall_score for m in get_matches_for_profile(db, profile_id)]
    total = len(scores)

    return MatchStats(
        total_matches=total,
        high_matches=sum(1 for s in scores if s >= HIGH_MATCH_SCORE),
        medium_matches=sum(1 for s in scores if MEDIUM_MATCH_SCORE <= s < HIGH_MATCH_SCORE),
        low_matches=sum(1 for s in scores if s < MEDIUM_MATCH_SCORE),
        average_score=round_half_up(sum(scores) / total) if total else 0,
    )


def list_matches_for_profile(
    db: Session,
    profile_id: UUID,
    sort: str = "score",
    order: str = "desc",
) -> List[MatchSummary]:
    summaries = []
    for match in get_matches_for_profile(db, profile_id):
        partner = match.user2 if match.user1_id == profile_id else match.user1
        summaries.append(MatchSummary(
            id=match.id,
            name=partner.name,
            traits=derive_traits(partner),
            match_percentage=match.overall_score,
            photo_url=partner.photo_url,
            status=match.status,
            created_at=match.created_at,
        ))

    key = (lambda s: s.created_at) if sort == "date" else (lambda s: s.match_percentage)
    summaries.sort(key=key, reverse=(order != "asc"))
    return summaries


def generate_all_matches(db: Session) -> MatchBatchOut:
    """Run match generation for every profile, counting profiles whose run failed."""
    profiles = db.query(UserProfile).order_by(UserProfile.created_at).all()
    logger.info("batch_match_generation_start", total_profiles=len(profiles))

    matches_created = 0
    errors = 0
    for profile in profiles:
        try:
            matches_created += len(generate_matches_for_profile(db, profile))
        except SQLAlchemyError as e:
            db.rollback()
            errors += 1
            logger.error("batch_match_generation_failed", profile_id=str(profile.id), error=str(e))

    result = MatchBatchOut(total_profiles=len(profiles), matches_created=matches_created, errors=errors)
    logger.info("batch_match_generation_complete", **result.model_dump())
    return result
