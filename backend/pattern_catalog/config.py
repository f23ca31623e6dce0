import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# Empty means "use the built-in patterns"
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", "")
CATALOG_DB_URL = os.getenv("CATALOG_DB_URL", "sqlite:///./pattern_catalog.db")
CATALOG_TITLE = os.getenv("CATALOG_TITLE", "Design Patterns")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
