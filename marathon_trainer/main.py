from fastapi import FastAPI
from loguru import logger

from marathon_trainer.api.export.plan_export import router as export_router
from marathon_trainer.api.training import router as training_router
from marathon_trainer.config.settings import settings
from marathon_trainer.core.logger import setup_logger

setup_logger(settings)

app = FastAPI(
    title="Marathon Trainer API",
    description="Personalized marathon, half-marathon and 10k training plans",
)

app.include_router(training_router)
app.include_router(export_router)

logger.info("Routers registered: training, export")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
