# geomatch/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Provider registry
REGISTRY_BASE_URL = os.getenv(
    "REGISTRY_BASE_URL",
    "https://caschigialli-e9bccpd4eafxewb7.westeurope-01.azurewebsites.net",
)
REGISTRY_IN_RANGE_PATH = "/cg/inRange"
REGISTRY_API_TOKEN = os.getenv("REGISTRY_API_TOKEN")

# Data source selection: "live" or "synthetic"
DATA_SOURCE = os.getenv("DATA_SOURCE", "synthetic")

# Runtime parameters
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
CONCURRENCY = 20
BATCH_SIZE = 15
SYNTHETIC_LATENCY_SECONDS = float(os.getenv("SYNTHETIC_LATENCY_SECONDS", "0"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Matching defaults (km)
DEFAULT_SEARCH_RADIUS_KM = 50.0
DEFAULT_SERVICE_RADIUS_KM = 10.0

SERVICE_CATEGORIES = [
    "Plumbing", "Electrical", "Carpentry", "Painting", "Gardening",
    "Cleaning", "Moving", "IT Support", "Appliance Repair", "HVAC",
    "Roofing", "Flooring", "Tiling", "Masonry", "Pest Control",
]

# File names
INPUT_CSV = "searches.csv"
OUTPUT_CSV = "matches.csv"
PROVIDERS_CSV = os.getenv("PROVIDERS_CSV")
