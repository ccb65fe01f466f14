# compareoffers/main.py
from fastapi import FastAPI

from compareoffers.core.logging_config import logger, setup_logging
from compareoffers.core.settings import settings
from compareoffers.routers import offers

# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version="0.1.0")

setup_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)
logger.info("startup", service=settings.APP_NAME)

app.include_router(offers.router)


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}
