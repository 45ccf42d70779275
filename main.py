import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, HOST, LOG_DIR, LOG_LEVEL, PORT, SITE_DIR
from routers import estimator, packages, site, testimonials

# ── Logging setup (console, plus a rotating file when LOG_DIR is set) ──
_handlers = [logging.StreamHandler()]
if LOG_DIR:
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
    _handlers.append(RotatingFileHandler(
        Path(LOG_DIR) / "hamro_vacation.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    ))

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=_handlers,
)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hamro Vacation",
    description="Travel agency site: static pages, package tiers and a trip cost estimator",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.get("/api/health")
def health():
    return {
        "status":   "ok",
        "message":  "Hamro Vacation site is running",
        "docs":     "/docs",
        "site_dir": str(SITE_DIR)
    }


app.include_router(packages.router)
app.include_router(estimator.router)
app.include_router(testimonials.router)
# Catch-all static routes go last
app.include_router(site.router)


if __name__ == "__main__":
    logger.info("Hamro Vacation site running on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
