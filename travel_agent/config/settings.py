import logging
import os
from dotenv import load_dotenv

load_dotenv()

# LLM Configuration
OLLAMA_MODEL = os.environ.get("OLLAMA_MODEL", "llama3.2:3b")
OLLAMA_BASE_URL = os.environ.get("OLLAMA_BASE_URL", "http://127.0.0.1:11434")
OLLAMA_TEMPERATURE = float(os.environ.get("OLLAMA_TEMPERATURE", "0"))

# Upper bound on model/tool steps for a single query
MAX_TOOL_ROUNDS = int(os.environ.get("MAX_TOOL_ROUNDS", "25"))

# API Configuration
API_TITLE = "Travel Agent Assistant"
HOST = "127.0.0.1"
DEFAULT_PORT = "8080"

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def get_port() -> int:
    """Port from the PORT env var, falling back to 8080 when unset or empty."""
    port = os.environ.get("PORT") or DEFAULT_PORT
    return int(port)


def init_logging() -> None:
    lvl = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=lvl, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
