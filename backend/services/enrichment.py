"""
Best-effort AI enrichment of stored records.

A record is always persisted before the advisory model is called. If the
call fails the record keeps its AI fields empty and is marked
``enrichment_status="failed"`` so clients can offer a retry; the failure
never turns into an error response.
"""

from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor
from advisor.components.exception.exception import AdvisoryServiceError
from advisor.components.src_logging.logger import logging
from backend.database import models
from backend.database.storage import storage


def enrich_assessment(db: Session, assessment: models.Assessment, advisor: CareerAdvisor):
    if assessment.type != "career":
        return assessment
    try:
        results = advisor.analyze_career_fit(assessment.data)
    except AdvisoryServiceError as e:
        logging.error(f"AI analysis failed for assessment {assessment.id}: {e}")
        return storage.assessments.update(db, assessment.id, enrichment_status=models.ENRICHMENT_FAILED)

    logging.info(f"Assessment {assessment.id} analyzed")
    return storage.assessments.update(
        db,
        assessment.id,
        results=results,
        score=results["overallScore"],
        completed_at=models.utcnow(),
        enrichment_status=models.ENRICHMENT_COMPLETED,
    )


def resume_analysis_fields(content: str, advisor: CareerAdvisor, resume_id: str = None):
    """Fields to write after analysing ``content``; only the status on failure."""
    try:
        result = advisor.analyze_resume(content)
    except AdvisoryServiceError as e:
        logging.error(f"Resume analysis failed for resume {resume_id}: {e}")
        return {"enrichment_status": models.ENRICHMENT_FAILED}

    return {
        "analysis": result["analysis"],
        "score": result["score"],
        "suggestions": result["suggestions"],
        "enrichment_status": models.ENRICHMENT_COMPLETED,
    }


def enrich_resume(db: Session, resume: models.Resume, advisor: CareerAdvisor):
    fields = resume_analysis_fields(resume.content, advisor, resume.id)
    return storage.resumes.update(db, resume.id, **fields)


def interview_questions(job_title: str, company, advisor: CareerAdvisor):
    """Returns ``(questions, enrichment_status)``; questions is ``[]`` on failure."""
    try:
        questions = advisor.generate_interview_questions(job_title, company)
    except AdvisoryServiceError as e:
        logging.error(f"Question generation failed for '{job_title}': {e}")
        return [], models.ENRICHMENT_FAILED
    return questions, models.ENRICHMENT_COMPLETED


def interview_evaluation_fields(questions, responses, advisor: CareerAdvisor, interview_id: str = None):
    try:
        result = advisor.analyze_interview_performance(questions, responses)
    except AdvisoryServiceError as e:
        logging.error(f"Interview evaluation failed for interview {interview_id}: {e}")
        return {"enrichment_status": models.ENRICHMENT_FAILED}

    feedback = dict(result["feedback"])
    feedback["questionScores"] = result.get("questionScores", [])
    return {
        "feedback": feedback,
        "score": result["overallScore"],
        "completed_at": models.utcnow(),
        "enrichment_status": models.ENRICHMENT_COMPLETED,
    }


def enrich_career_path(db: Session, career_path: models.CareerPath, advisor: CareerAdvisor):
    try:
        plan = advisor.generate_career_recommendations(
            career_path.current_role,
            career_path.target_role,
            career_path.industry,
        )
    except AdvisoryServiceError as e:
        logging.error(f"Career path generation failed for career path {career_path.id}: {e}")
        return storage.career_paths.update(db, career_path.id, enrichment_status=models.ENRICHMENT_FAILED)

    logging.info(f"Career path {career_path.id} generated")
    return storage.career_paths.update(
        db,
        career_path.id,
        steps=plan["steps"],
        timeline=plan["timeline"],
        skill_gaps=plan["skillGaps"],
        learning_plan=plan["learningPlan"],
        enrichment_status=models.ENRICHMENT_COMPLETED,
    )
