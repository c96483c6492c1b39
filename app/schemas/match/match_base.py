from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.schemas.profile.profile_base import ProfileOut


class MatchStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    saved = "saved"
    passed = "passed"


class MatchOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user1_id: UUID
    user2_id: UUID
    overall_score: int
    category_scores: Dict[str, int]
    status: MatchStatus
    compatibility_report: Optional[str] = None
    icebreakers: List[str] = []
    created_at: datetime


class MatchStatusUpdate(BaseModel):
    status: MatchStatus


class MatchSummary(BaseModel):
    id: UUID
    name: str
    traits: List[str]
    match_percentage: int
    photo_url: Optional[str] = None
    status: MatchStatus
    created_at: datetime


class MatchListOut(BaseModel):
    matches: List[MatchSummary]
    total: int


class MatchStats(BaseModel):
    total_matches: int
    high_matches: int
    medium_matches: int
    low_matches: int
    average_score: int


class MatchGenerationOut(BaseModel):
    profile_id: UUID
    matches_created: int
    match_ids: List[UUID]


class MatchRegenerationOut(BaseModel):
    profile_id: UUID
    matches_updated: int


class MatchDeletionOut(BaseModel):
    profile_id: UUID
    matches_deleted: int


class MatchBatchOut(BaseModel):
    total_profiles: int
    matches_created: int
    errors: int


class CategoryBreakdownOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    category: str
    your_value: str
    their_value: str
    compatibility: int
    description: str


class ComparisonOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    current_user: ProfileOut
    match_user: ProfileOut
    match: MatchOut
    category_breakdown: List[CategoryBreakdownOut]
    overall_score: int
