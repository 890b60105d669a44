import os
from dotenv import load_dotenv

# load .env before anything reads the environment
load_dotenv()

GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# comma separated, e.g. "https://snow.example.com,http://localhost:3000"
CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]
