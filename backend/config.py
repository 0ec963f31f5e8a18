import os
from dotenv import load_dotenv

load_dotenv()

TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_ENV_VALUES


def normalize_database_url(value):
    raw = (value or "").strip()
    if raw.startswith("postgres://"):
        return "postgresql://" + raw[len("postgres://"):]
    return raw


DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


def parse_cors_origins(value):
    if not value:
        return DEFAULT_CORS_ORIGINS
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


# Database
DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL")) or "sqlite:///./career_coach.db"

# Advisory model
ADVISOR_PROVIDER = (os.getenv("ADVISOR_PROVIDER") or "gemini").strip().lower()
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = (os.getenv("GEMINI_MODEL") or "gemini-2.5-flash").strip()
HUGGINGFACE_HUB_ACCESS_KEY = os.getenv("HUGGINGFACE_HUB_ACCESS_KEY")
HF_REPO_ID = (os.getenv("HF_REPO_ID") or "meta-llama/Llama-3.1-8B-Instruct").strip()
ADVISOR_TEMPERATURE = float(os.getenv("ADVISOR_TEMPERATURE", "0.4"))

# Sessions
SESSION_COOKIE_NAME = (os.getenv("SESSION_COOKIE_NAME") or "career_coach_sid").strip()
SESSION_TTL_HOURS = max(1, int(os.getenv("SESSION_TTL_HOURS", "168")))
SESSION_COOKIE_SECURE = env_flag("SESSION_COOKIE_SECURE", False)

# HTTP
CORS_ALLOW_ORIGINS = parse_cors_origins(os.getenv("CORS_ALLOW_ORIGINS"))
