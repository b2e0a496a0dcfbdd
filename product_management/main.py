import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from product_management.api import product_routes
from product_management.core.config import settings
from product_management.database import SessionLocal, engine, init_db
from product_management.services.seed import seed_products

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def mask_url_password(url: str) -> str:
    """Mask password in URL for logging."""
    try:
        from urllib.parse import urlparse
        parsed = urlparse(url)
        if parsed.password:
            return url.replace(f":{parsed.password}@", ":****@")
        return url
    except ValueError:
        return url


async def check_database() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (OperationalError, OSError) as e:
        logger.warning(f"Database connection failed: {e}")
        return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    if await check_database():
        logger.info(f"Connected to database: {mask_url_password(settings.DATABASE_URL)}")
        await init_db()

        if settings.SEED_ON_STARTUP:
            try:
                async with SessionLocal() as session:
                    await seed_products(session, settings.SEED_FILE)
                logger.info("Seeding database succeeded.")
            except Exception:
                logger.error("An error occurred while seeding the database.", exc_info=True)
                raise

    yield

    await engine.dispose()


app = FastAPI(title="Product Management", lifespan=lifespan)

app.include_router(product_routes.router)


@app.get("/health")
async def health():
    """Report service and database status."""
    return {"status": "ok", "database": await check_database()}
