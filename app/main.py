#run it with uvicorn app.main:app --reload
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from dotenv import load_dotenv
import asyncio
import logging

from app.api.api_router import api_router
from app.core.config import Settings, get_settings
from app.core.status import ConnectivityStatus
from app.db.init_db import initialize_database
from app.db.mongo import ContactStore
from app.services.contact import REQUIRED_FIELDS_MESSAGE
from app.services.mailer import ContactMailer

# Load environment variables from .env file
load_dotenv()

# Set up logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def check_database(store, collection_name: str):
    """Connect to MongoDB and make sure the contacts collection exists"""
    if await store.connect():
        await initialize_database(store.db, collection_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Start dependency checks without waiting for them, so the server listens
    and /ping answers even while MongoDB or SMTP are still unreachable.
    """
    logger.info("🚀 Starting MongoDB and email transporter checks...")
    tasks = [
        asyncio.create_task(check_database(app.state.store, app.state.settings.mongo_collection)),
        asyncio.create_task(app.state.mailer.verify()),
    ]
    app.state.startup_tasks = tasks

    yield

    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)

    try:
        app.state.store.close()
    except Exception as e:
        logger.error(f"Error closing MongoDB connections: {str(e)}")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"⚠️ Invalid request body: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": REQUIRED_FIELDS_MESSAGE,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def create_app(settings: Settings = None, store=None, mailer=None,
               status: ConnectivityStatus = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration, defaults to the environment
        store: Persistence client, defaults to a MongoDB ContactStore
        mailer: Notification client, defaults to an SMTP ContactMailer
        status: Connectivity status shared by the collaborators and /ping
    """
    settings = settings or get_settings()
    status_cell = status or ConnectivityStatus()

    app = FastAPI(title="Contact Form Backend", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.status = status_cell
    app.state.store = store or ContactStore(settings, status_cell)
    app.state.mailer = mailer or ContactMailer(settings, status_cell)

    # CORS setup, any origin may post the form
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router)
    return app


app = create_app()


def run():
    import uvicorn
    settings = get_settings()
    logger.info(f"🚀 Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
