"""Application configuration loaded from the environment and an optional .env file."""
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable not set!")

SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

# Root of the blob store, uploaded images live under PUBLIC_DIR/uploads
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")

DEFAULT_AUTHOR_ID = int(os.getenv("DEFAULT_AUTHOR_ID", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "app.log")
