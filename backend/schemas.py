"""
Request and response schemas for the HTTP API.

JSON bodies use camelCase keys (``userId``, ``updatedAt``); the Python side
keeps snake_case attribute names that match the ORM models, so responses are
built straight from model instances with ``from_attributes``.
"""

from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class RecordOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class OwnedRecordOut(RecordOut):
    user_id: str


class PartialUpdate(CamelModel):
    """Base for PATCH bodies: only sent fields are applied, and explicit nulls
    are refused for columns that cannot hold them."""

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if name in self.non_nullable and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# Users

class SignupRequest(CamelModel):
    username: str = Field(min_length=3, max_length=64)
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar: Optional[str] = None
    onboarding_completed: bool = False


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"username", "email", "password", "onboarding_completed"})

    username: Optional[str] = Field(default=None, min_length=3, max_length=64)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar: Optional[str] = None
    onboarding_completed: Optional[bool] = None


class UserOut(RecordOut):
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar: Optional[str] = None
    onboarding_completed: bool = False


# Assessments

class AssessmentCreate(CamelModel):
    user_id: Optional[str] = None
    type: Literal["career", "skill", "personality"]
    data: Dict[str, Any]


class AssessmentOut(OwnedRecordOut):
    type: str
    data: Dict[str, Any]
    results: Optional[Dict[str, Any]] = None
    score: Optional[int] = None
    completed_at: Optional[datetime] = None
    enrichment_status: str


# Resumes

class ResumeCreate(CamelModel):
    user_id: Optional[str] = None
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class ResumeUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"title", "content"})

    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)


class ResumeOut(OwnedRecordOut):
    title: str
    content: str
    analysis: Optional[Dict[str, Any]] = None
    score: Optional[int] = None
    suggestions: Optional[List[str]] = None
    enrichment_status: str


# Interviews

class InterviewCreate(CamelModel):
    user_id: Optional[str] = None
    job_title: str = Field(min_length=1)
    company: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)


class InterviewUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"job_title", "questions"})

    job_title: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = None
    questions: Optional[List[Dict[str, Any]]] = None
    responses: Optional[Any] = None
    feedback: Optional[Dict[str, Any]] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)
    duration: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[datetime] = None


class InterviewOut(OwnedRecordOut):
    job_title: str
    company: Optional[str] = None
    questions: List[Dict[str, Any]]
    responses: Optional[Any] = None
    feedback: Optional[Dict[str, Any]] = None
    score: Optional[int] = None
    duration: Optional[int] = None
    completed_at: Optional[datetime] = None
    enrichment_status: str


# Career paths

class CareerPathCreate(CamelModel):
    user_id: Optional[str] = None
    current_role: Optional[str] = None
    target_role: str = Field(min_length=1)
    industry: Optional[str] = None
    progress: int = Field(default=0, ge=0, le=100)


class CareerPathUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"target_role", "steps", "progress"})

    current_role: Optional[str] = None
    target_role: Optional[str] = Field(default=None, min_length=1)
    industry: Optional[str] = None
    steps: Optional[List[Dict[str, Any]]] = None
    timeline: Optional[Dict[str, Any]] = None
    skill_gaps: Optional[List[Dict[str, Any]]] = None
    learning_plan: Optional[List[Dict[str, Any]]] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)


class CareerPathOut(OwnedRecordOut):
    current_role: Optional[str] = None
    target_role: str
    industry: Optional[str] = None
    steps: List[Dict[str, Any]]
    timeline: Optional[Dict[str, Any]] = None
    skill_gaps: Optional[List[Dict[str, Any]]] = None
    learning_plan: Optional[List[Dict[str, Any]]] = None
    progress: int
    enrichment_status: str


# Skills

class SkillCreate(CamelModel):
    user_id: Optional[str] = None
    name: str = Field(min_length=1)
    category: Optional[str] = None
    level: int = Field(ge=1, le=10)
    validated: bool = False
    evidence: Optional[Any] = None


class SkillUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name", "level", "validated"})

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    level: Optional[int] = Field(default=None, ge=1, le=10)
    validated: Optional[bool] = None
    evidence: Optional[Any] = None


class SkillOut(OwnedRecordOut):
    name: str
    category: Optional[str] = None
    level: int
    validated: bool
    evidence: Optional[Any] = None


class SkillGapRequest(CamelModel):
    target_role: str = Field(min_length=1)
    industry: Optional[str] = None


# Goals

class GoalCreate(CamelModel):
    user_id: Optional[str] = None
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    target_date: Optional[datetime] = None
    completed: bool = False
    progress: int = Field(default=0, ge=0, le=100)
    milestones: Optional[Any] = None


class GoalUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"title", "completed", "progress"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    target_date: Optional[datetime] = None
    completed: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    milestones: Optional[Any] = None


class GoalOut(OwnedRecordOut):
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    target_date: Optional[datetime] = None
    completed: bool
    progress: int
    milestones: Optional[Any] = None


# Recommendations

class RecommendationOut(OwnedRecordOut):
    type: str
    title: str
    description: Optional[str] = None
    url: Optional[str] = None
    meta: Optional[Any] = Field(default=None, validation_alias="meta", serialization_alias="metadata")
    priority: int
    completed: bool


class MessageOut(BaseModel):
    message: str
