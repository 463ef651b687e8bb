import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fuzepicker.api.config import API_PREFIX, CORS_ORIGINS, get_log_level
from fuzepicker.api.routers import elements, health, selectors

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FuzePicker",
    description="Selector synthesis and element capture for picked DOM elements",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=API_PREFIX)
app.include_router(selectors.router, prefix=API_PREFIX)
app.include_router(elements.router, prefix=API_PREFIX)


@app.get("/")
async def root():
    return {"message": "Welcome to the FuzePicker API. Go to /docs for documentation."}
