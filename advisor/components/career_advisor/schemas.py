from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


def capped(limit: int):
    def _cap(value):
        if isinstance(value, (list, tuple)):
            return list(value)[:limit]
        return value
    return _cap


def clamp_between(lower: int, upper: int):
    def _clamp(value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return value
        return max(lower, min(upper, int(round(value))))
    return _clamp


Score = Annotated[int, BeforeValidator(clamp_between(0, 100))]
Level = Annotated[int, BeforeValidator(clamp_between(1, 10))]
Months = Annotated[int, BeforeValidator(clamp_between(0, 600))]


def Items(item_type, limit: int):
    return Annotated[List[item_type], BeforeValidator(capped(limit))]


class AdvisorModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Career assessment

class CareerFitAnalysis(AdvisorModel):
    overall_score: Score = Field(description="Overall career-fit score from 0 to 100")
    recommended_roles: Items(str, 5) = Field(description="Up to 5 job roles that fit the candidate")
    strengths: Items(str, 5) = Field(description="Up to 5 professional strengths")
    areas_for_improvement: Items(str, 5) = Field(description="Up to 5 areas the candidate should work on")
    career_suggestions: Items(str, 5) = Field(description="Up to 5 specific, actionable career suggestions")


# Resume

class ResumeFindings(AdvisorModel):
    strengths: Items(str, 5) = Field(description="Up to 5 strengths of the resume")
    weaknesses: Items(str, 5) = Field(description="Up to 5 weaknesses of the resume")
    suggestions: Items(str, 5) = Field(description="Up to 5 targeted fixes for the weaknesses")


class ResumeAnalysis(AdvisorModel):
    score: Score = Field(description="Overall resume quality score from 0 to 100")
    analysis: ResumeFindings
    suggestions: Items(str, 8) = Field(description="Up to 8 concrete improvement suggestions")


# Interview questions

class InterviewQuestion(AdvisorModel):
    question: str
    category: Literal["Behavioral", "Technical", "Situational", "Culture Fit", "General"]
    difficulty: Literal["Easy", "Medium", "Hard"]


class InterviewQuestionSet(RootModel):
    root: Items(InterviewQuestion, 12)


# Career path

class CareerStep(AdvisorModel):
    title: str
    description: str
    duration: str
    tasks: Items(str, 5) = Field(default_factory=list)


class CareerTimeline(AdvisorModel):
    total_months: Months = Field(description="Total length of the plan in months")
    phases: Items(str, 4) = Field(default_factory=list)


class SkillGap(AdvisorModel):
    name: str
    current_level: Optional[Level] = None
    target_level: Optional[Level] = None
    priority: Literal["High", "Medium", "Low"]


class LearningResource(AdvisorModel):
    title: str
    description: Optional[str] = None
    type: Literal["Course", "Certification", "Book", "Workshop", "Project", "Mentorship"]
    duration: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=1, le=5)


class CareerRecommendations(AdvisorModel):
    steps: Items(CareerStep, 6)
    timeline: CareerTimeline
    skill_gaps: Items(SkillGap, 8)
    learning_plan: Items(LearningResource, 10)


# Interview performance

class InterviewFeedback(AdvisorModel):
    strengths: Items(str, 5)
    improvements: Items(str, 5)
    recommendations: Items(str, 5)


class QuestionScore(AdvisorModel):
    question: str
    score: Score
    feedback: str


class InterviewPerformance(AdvisorModel):
    overall_score: Score
    feedback: InterviewFeedback
    question_scores: List[QuestionScore] = Field(default_factory=list)


# Skill gaps

class SkillGapSummary(AdvisorModel):
    strength_areas: Items(str, 5)
    gap_areas: Items(str, 5)
    recommendations: Items(str, 5)


class SkillGapItem(AdvisorModel):
    skill: str
    importance: Literal["Critical", "Important", "Nice to Have"]
    difficulty: Literal["Beginner", "Intermediate", "Advanced"]
    time_to_learn: Optional[str] = None


class LearningPhase(AdvisorModel):
    phase: str
    skills: Items(str, 3)
    duration: str
    resources: Items(str, 3) = Field(default_factory=list)


class SkillGapAnalysis(AdvisorModel):
    analysis: SkillGapSummary
    skill_gaps: Items(SkillGapItem, 10)
    learning_path: Items(LearningPhase, 4)
