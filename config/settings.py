# config/settings.py

import os
from dotenv import load_dotenv

load_dotenv()

# Remote code-generation service. Leaving MAGIC_API_URL unset skips the remote stage.
MAGIC_API_URL = os.getenv("MAGIC_API_URL")
MAGIC_VARIATIONS_URL = os.getenv("MAGIC_VARIATIONS_URL")
MAGIC_HEALTH_URL = os.getenv("MAGIC_HEALTH_URL")

# Codebase introspection
PROJECT_DIRECTORY = os.getenv("PROJECT_DIRECTORY", os.getcwd())
CONTEXT_CACHE_TTL = int(os.getenv("CONTEXT_CACHE_TTL", "300"))  # 5 minutes default
MAX_SCANNED_FILES = int(os.getenv("MAX_SCANNED_FILES", "25"))

# History store
HISTORY_MAX_SIZE = int(os.getenv("HISTORY_MAX_SIZE", "100"))
HISTORY_DB_PATH = os.getenv("HISTORY_DB_PATH", "component_history.db")
HISTORY_STORAGE_KEY = "magicComponentHistory"
COLLECTIONS_STORAGE_KEY = "magicComponentCollections"

# Gemini-backed generation endpoint (/api/magic/generate)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GENERATION_TIMEOUT = int(os.getenv("GENERATION_TIMEOUT", "120"))

# Logging
LOG_FILE = os.getenv("LOG_FILE", "componentcraft.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
