import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from .database import Base

ENRICHMENT_PENDING = "pending"
ENRICHMENT_COMPLETED = "completed"
ENRICHMENT_FAILED = "failed"
ENRICHMENT_SKIPPED = "skipped"


def generate_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class RecordMixin:
    id = Column(String(36), primary_key=True, index=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class User(RecordMixin, Base):
    __tablename__ = "users"

    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    onboarding_completed = Column(Boolean, default=False, nullable=False)

    assessments = relationship("Assessment", back_populates="owner", cascade="all, delete-orphan")
    resumes = relationship("Resume", back_populates="owner", cascade="all, delete-orphan")
    interviews = relationship("Interview", back_populates="owner", cascade="all, delete-orphan")
    career_paths = relationship("CareerPath", back_populates="owner", cascade="all, delete-orphan")
    skills = relationship("Skill", back_populates="owner", cascade="all, delete-orphan")
    goals = relationship("Goal", back_populates="owner", cascade="all, delete-orphan")
    recommendations = relationship("Recommendation", back_populates="owner", cascade="all, delete-orphan")


class Assessment(RecordMixin, Base):
    __tablename__ = "assessments"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    type = Column(String, nullable=False)  # career, skill, personality
    data = Column(JSON, nullable=False)
    results = Column(JSON, nullable=True)
    score = Column(Integer, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    enrichment_status = Column(String, default=ENRICHMENT_PENDING, nullable=False)

    owner = relationship("User", back_populates="assessments")


class Resume(RecordMixin, Base):
    __tablename__ = "resumes"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    analysis = Column(JSON, nullable=True)
    score = Column(Integer, nullable=True)
    suggestions = Column(JSON, nullable=True)
    enrichment_status = Column(String, default=ENRICHMENT_PENDING, nullable=False)

    owner = relationship("User", back_populates="resumes")


class Interview(RecordMixin, Base):
    __tablename__ = "interviews"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    job_title = Column(String, nullable=False)
    company = Column(String, nullable=True)
    questions = Column(JSON, nullable=False, default=list)
    responses = Column(JSON, nullable=True)
    feedback = Column(JSON, nullable=True)
    score = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    completed_at = Column(DateTime(timezone=True), nullable=True)
    enrichment_status = Column(String, default=ENRICHMENT_PENDING, nullable=False)

    owner = relationship("User", back_populates="interviews")


class CareerPath(RecordMixin, Base):
    __tablename__ = "career_paths"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    current_role = Column(String, nullable=True)
    target_role = Column(String, nullable=False)
    industry = Column(String, nullable=True)
    steps = Column(JSON, nullable=False, default=list)
    timeline = Column(JSON, nullable=True)
    skill_gaps = Column(JSON, nullable=True)
    learning_plan = Column(JSON, nullable=True)
    progress = Column(Integer, default=0, nullable=False)
    enrichment_status = Column(String, default=ENRICHMENT_PENDING, nullable=False)

    owner = relationship("User", back_populates="career_paths")


class Skill(RecordMixin, Base):
    __tablename__ = "skills"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)  # technical, soft, industry
    level = Column(Integer, nullable=False)  # 1-10
    validated = Column(Boolean, default=False, nullable=False)
    evidence = Column(JSON, nullable=True)

    owner = relationship("User", back_populates="skills")


class Goal(RecordMixin, Base):
    __tablename__ = "goals"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)  # career, skill, salary, role
    target_date = Column(DateTime(timezone=True), nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    progress = Column(Integer, default=0, nullable=False)
    milestones = Column(JSON, nullable=True)

    owner = relationship("User", back_populates="goals")


class Recommendation(RecordMixin, Base):
    __tablename__ = "recommendations"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    type = Column(String, nullable=False)  # course, job, skill, networking
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    url = Column(String, nullable=True)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=True)
    priority = Column(Integer, default=5, nullable=False)  # 1-10
    completed = Column(Boolean, default=False, nullable=False)

    owner = relationship("User", back_populates="recommendations")
