import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
PRODUCTHUNT_API_KEY = os.getenv("PRODUCTHUNT_API_KEY")
PRODUCTHUNT_API_URL = os.getenv(
    "PRODUCTHUNT_API_URL", "https://api.producthunt.com/v2/api/graphql"
)
PRODUCTHUNT_TIMEOUT = os.getenv("PRODUCTHUNT_TIMEOUT", "30")  # seconds, parsed by GraphQLClient

# Result sizes requested from the posts connection
NEWEST_LIMIT = 10
TOPIC_LIMIT = 99
TOP_BY_DATE_LIMIT = 5
