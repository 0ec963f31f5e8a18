import sys
from functools import lru_cache

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_huggingface import ChatHuggingFace, HuggingFaceEndpoint
from pydantic import ValidationError

from advisor.components.career_advisor.schemas import (
    CareerFitAnalysis,
    CareerRecommendations,
    InterviewPerformance,
    InterviewQuestionSet,
    ResumeAnalysis,
    SkillGapAnalysis,
)
from advisor.components.exception.exception import AdvisoryServiceError
from advisor.components.src_logging.logger import logging
from backend import config

CAREER_FIT_PROMPT = """
You are a career counselor analyzing a professional's career assessment.

Assessment Data:
- Interests: {interests}
- Skills: {skills}
- Values: {values}
- Work Style: {work_style}
- Experience: {experience}
- Education: {education}
- Goals: {goals}

Provide a comprehensive career analysis with specific, actionable recommendations.

{format_instructions}
"""

RESUME_PROMPT = """
You are an expert resume reviewer and career coach. Analyze this resume and give detailed feedback.

Resume Content:
{content}

Cover strengths, weaknesses, specific improvement suggestions and an overall score out of 100.

{format_instructions}
"""

INTERVIEW_QUESTIONS_PROMPT = """
Generate interview questions for a {job_title} position{company_clause}.

Include:
- 3-4 behavioral questions
- 3-4 technical or role-specific questions
- 2-3 situational questions
- 1-2 company or culture fit questions

Give each question a category and a difficulty level. Return at most 12 questions as a JSON array.

{format_instructions}
"""

CAREER_PATH_PROMPT = """
Create a detailed career transition plan from {current_role} to {target_role}{industry_clause}.

Provide:
- A step-by-step career progression plan
- A timeline for each step
- The skill gaps to address
- Specific learning resources
- Milestones and checkpoints

Make it actionable and realistic.

{format_instructions}
"""

INTERVIEW_PERFORMANCE_PROMPT = """
Analyze this mock interview performance and provide detailed feedback.

Questions and Responses:
{transcript}

Score each answer out of 100, give an overall score and concrete improvement suggestions.

{format_instructions}
"""

SKILL_GAP_PROMPT = """
Analyze the skill gaps for a transition to {target_role}{industry_clause}.

Current Skills:
{skills}

Identify missing skills and improvement areas, and lay out a learning path.

{format_instructions}
"""


def build_chat_model():
    if config.ADVISOR_PROVIDER == "huggingface":
        if not config.HUGGINGFACE_HUB_ACCESS_KEY:
            raise AdvisoryServiceError("HUGGINGFACE_HUB_ACCESS_KEY is not configured", sys)
        endpoint = HuggingFaceEndpoint(
            repo_id=config.HF_REPO_ID,
            huggingfacehub_api_token=config.HUGGINGFACE_HUB_ACCESS_KEY,
            task="text-generation",
            temperature=config.ADVISOR_TEMPERATURE,
        )
        return ChatHuggingFace(llm=endpoint)

    if not config.GEMINI_API_KEY:
        raise AdvisoryServiceError("GEMINI_API_KEY is not configured", sys)
    return ChatGoogleGenerativeAI(
        model=config.GEMINI_MODEL,
        google_api_key=config.GEMINI_API_KEY,
        temperature=config.ADVISOR_TEMPERATURE,
    )


def _listing(values):
    if not values:
        return "Not specified"
    if isinstance(values, (list, tuple)):
        return ", ".join(str(v) for v in values)
    return str(values)


def _message_text(message):
    content = getattr(message, "content", message)
    if isinstance(content, list):
        # some chat models return a list of content blocks
        parts = []
        for block in content:
            if isinstance(block, dict):
                parts.append(str(block.get("text", "")))
            else:
                parts.append(str(block))
        content = "".join(parts)
    return content or ""


def _question_text(question):
    if isinstance(question, dict):
        return question.get("question") or str(question)
    return str(question)


def _response_at(responses, index):
    if isinstance(responses, dict):
        return responses.get(str(index)) or responses.get(index)
    if isinstance(responses, (list, tuple)) and index < len(responses):
        return responses[index]
    return None


class CareerAdvisor:
    """
    Structured career advice from a chat model.

    Every public method returns plain JSON-ready data (camelCase keys) or
    raises AdvisoryServiceError. Callers decide whether that failure is fatal.
    """

    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            try:
                self._llm = build_chat_model()
            except AdvisoryServiceError:
                raise
            except Exception as e:
                raise AdvisoryServiceError(e, sys)
        return self._llm

    def _generate(self, task, template, variables, output_model):
        llm = self.llm
        parser = JsonOutputParser(pydantic_object=output_model)
        prompt = PromptTemplate(
            template=template,
            input_variables=list(variables),
            partial_variables={"format_instructions": parser.get_format_instructions()},
        )

        logging.info(f"Requesting {task} from advisory model")
        try:
            message = (prompt | llm).invoke(variables)
        except Exception as e:
            logging.error(f"{task} request failed: {e}")
            raise AdvisoryServiceError(e, sys)

        text = _message_text(message)
        if not text.strip():
            raise AdvisoryServiceError(f"Empty response from advisory model during {task}", sys)

        try:
            payload = parser.parse(text)
            result = output_model.model_validate(payload)
        except (OutputParserException, ValidationError) as e:
            logging.error(f"{task} returned unusable output: {e}")
            raise AdvisoryServiceError(e, sys)

        return result.model_dump(by_alias=True, exclude_none=True)

    def analyze_career_fit(self, data):
        data = data or {}
        return self._generate(
            "career fit analysis",
            CAREER_FIT_PROMPT,
            {
                "interests": _listing(data.get("interests")),
                "skills": _listing(data.get("skills")),
                "values": _listing(data.get("values")),
                "work_style": _listing(data.get("workStyle")),
                "experience": _listing(data.get("experience")),
                "education": _listing(data.get("education")),
                "goals": _listing(data.get("goals")),
            },
            CareerFitAnalysis,
        )

    def analyze_resume(self, content):
        return self._generate("resume analysis", RESUME_PROMPT, {"content": content}, ResumeAnalysis)

    def generate_interview_questions(self, job_title, company=None):
        return self._generate(
            "interview questions",
            INTERVIEW_QUESTIONS_PROMPT,
            {
                "job_title": job_title,
                "company_clause": f" at {company}" if company else "",
            },
            InterviewQuestionSet,
        )

    def generate_career_recommendations(self, current_role, target_role, industry=None):
        return self._generate(
            "career path plan",
            CAREER_PATH_PROMPT,
            {
                "current_role": current_role or "current position",
                "target_role": target_role,
                "industry_clause": f" in the {industry} industry" if industry else "",
            },
            CareerRecommendations,
        )

    def analyze_interview_performance(self, questions, responses):
        transcript = ""
        for i, question in enumerate(questions or []):
            answer = _response_at(responses, i) or "No response provided"
            transcript += f"""
            Q{i + 1}: {_question_text(question)}
            Response: {answer}
            """
        return self._generate(
            "interview performance analysis",
            INTERVIEW_PERFORMANCE_PROMPT,
            {"transcript": transcript},
            InterviewPerformance,
        )

    def analyze_skill_gaps(self, skills, target_role, industry=None):
        lines = []
        for skill in skills or []:
            lines.append(f"- {skill['name']}: Level {skill['level']}/10 ({skill.get('category') or 'uncategorized'})")
        return self._generate(
            "skill gap analysis",
            SKILL_GAP_PROMPT,
            {
                "target_role": target_role,
                "industry_clause": f" in {industry}" if industry else "",
                "skills": "\n".join(lines) or "No skills recorded",
            },
            SkillGapAnalysis,
        )


@lru_cache(maxsize=1)
def get_advisor():
    if config.ADVISOR_PROVIDER == "huggingface":
        if not config.HUGGINGFACE_HUB_ACCESS_KEY:
            logging.warning("HUGGINGFACE_HUB_ACCESS_KEY is missing. Advisory requests will fail.")
    elif not config.GEMINI_API_KEY:
        logging.warning("GEMINI_API_KEY is missing. Advisory requests will fail.")
    return CareerAdvisor()
