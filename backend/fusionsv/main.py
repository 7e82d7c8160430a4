import logging
from fastapi import FastAPI
from fusionsv.api.v1 import router as api_router
from fusionsv.config import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Fusion Structural Variant Mapper",
    description="Maps fusion mutation records to structural variants",
    version="1.0.0"
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
