import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.rest_routes.advisory import router as advisory_router
from app.api.rest_routes.auth import router as auth_router
from app.api.rest_routes.expenses import router as expenses_router
from app.api.rest_routes.feedback import router as feedback_router
from app.api.rest_routes.helplines import router as helplines_router
from app.api.rest_routes.market_prices import router as market_prices_router
from app.api.rest_routes.plant_health import router as plant_health_router
from app.api.rest_routes.weather import router as weather_router
from app.core.config import settings
from app.core.mongodb import close_mongo_client, init_mongo_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await init_mongo_client()
    yield
    await close_mongo_client()


app = FastAPI(title="Kisan Sathi API", lifespan=lifespan)

app.include_router(auth_router)
app.include_router(market_prices_router)
app.include_router(advisory_router)
app.include_router(plant_health_router)
app.include_router(weather_router)
app.include_router(helplines_router)
app.include_router(expenses_router)
app.include_router(feedback_router)


@app.get("/")
async def root():
    return {"message": "Welcome to Kisan Sathi, your farming companion!"}
