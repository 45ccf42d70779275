import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# ── Server ───────────────────────────────────────────────────────
HOST         = os.getenv("HOST", "0.0.0.0")
PORT         = int(os.getenv("PORT", "3000"))
SITE_DIR     = Path(os.getenv("SITE_DIR", str(BASE_DIR / "site")))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# ── Logging ──────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR   = os.getenv("LOG_DIR", "")

# ── Contact + widgets ────────────────────────────────────────────
WHATSAPP_NUMBER              = os.getenv("WHATSAPP_NUMBER", "18023106841")
TESTIMONIAL_INTERVAL_SECONDS = int(os.getenv("TESTIMONIAL_INTERVAL_SECONDS", "8"))

# ── Estimator ────────────────────────────────────────────────────
TRAVELERS_PER_ROOM = 2
ESTIMATE_NOTE      = (
    "Note: Estimates only. Final pricing varies by season, hotel selection, "
    "and availability. Taxes/fees extra where applicable."
)
