import os

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import URL

# Values from a local .env fill in whatever the real environment leaves unset
load_dotenv(find_dotenv(usecwd=True), override=False)

# Connection parameters for the backing store; DATABASE_URL overrides them all
DB_HOST = os.environ.get("DB_HOST")
DB_USER = os.environ.get("DB_USER", "postgres")
DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
DB_NAME = os.environ.get("DB_NAME", "task_manager")
DB_PORT = int(os.environ.get("DB_PORT", 5432))


def build_database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if url:
        return url
    if DB_HOST:
        return URL.create(
            "postgresql+psycopg",
            username=DB_USER,
            password=DB_PASSWORD or None,
            host=DB_HOST,
            port=DB_PORT,
            database=DB_NAME,
        ).render_as_string(hide_password=False)
    # Default to local SQLite for dev/tests
    return "sqlite:///./tasktracker.db"


DATABASE_URL = build_database_url()

# Base URL the frontend's API client talks to
TASKS_API_URL = os.environ.get("TASKS_API_URL", "http://localhost:8000/api")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
