import motor.motor_asyncio
import logging
from fastapi import Request
from pymongo import monitoring

from app.core.config import Settings
from app.core.status import ConnectivityStatus, OK, FAILED
from app.models.contact import ContactSubmission

# Set up logger
logger = logging.getLogger(__name__)


def mask_mongo_uri(uri: str) -> str:
    """Mask the password in a MongoDB connection string for logging"""
    masked_uri = uri
    if '@' in uri and ':' in uri:
        parts = uri.split('@')
        if len(parts) > 1:
            credentials_part = parts[0]
            if ':' in credentials_part:
                user_pass = credentials_part.split('://')[-1]
                if ':' in user_pass:
                    user, password = user_pass.split(':', 1)
                    masked_credentials = f"{user}:{'*' * len(password)}"
                    masked_uri = uri.replace(user_pass, masked_credentials)
    return masked_uri


class TopologyStatusListener(monitoring.TopologyListener):
    """Mirrors the driver's view of server availability into the status cell."""

    def __init__(self, status: ConnectivityStatus):
        self.status = status

    def opened(self, event):
        pass

    def description_changed(self, event):
        had_server = event.previous_description.has_writable_server()
        has_server = event.new_description.has_writable_server()
        if has_server and not had_server:
            self.status.set_database(OK)
        elif had_server and not has_server:
            self.status.set_database(FAILED, "lost connection to MongoDB server")

    def closed(self, event):
        pass


class ContactStore:
    """Persists contact submissions to MongoDB."""

    def __init__(self, settings: Settings, status: ConnectivityStatus,
                 client_factory=motor.motor_asyncio.AsyncIOMotorClient):
        self.settings = settings
        self.status = status
        self.client_factory = client_factory
        self.client = None
        self.db = None

    async def connect(self) -> bool:
        """
        Create the MongoDB client and check the server once.

        Never raises: a missing URI, a malformed URI or an unreachable server
        is logged and recorded as a failed database status.

        Returns:
            bool: True if the server answered the ping
        """
        uri = self.settings.effective_mongo_uri
        if not uri:
            logger.error("❌ MongoDB URI not configured! Set MONGO_URI or MONGODB_URL.")
            self.status.set_database(FAILED, "MongoDB URI not configured")
            return False

        logger.info(f"MongoDB URI configured: {mask_mongo_uri(uri)}")

        try:
            self.client = self.client_factory(
                uri,
                serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
                event_listeners=[TopologyStatusListener(self.status)],
            )
            self.db = self.client.get_default_database(default=self.settings.mongo_db_name)
            await self.client.admin.command("ping")
        except Exception as e:
            logger.error(f"❌ MongoDB connection error: {str(e)}")
            self.status.set_database(FAILED, str(e))
            return False

        logger.info(f"✅ MongoDB connected to database: {self.db.name}")
        self.status.set_database(OK)
        return True

    @property
    def collection(self):
        if self.db is None:
            raise RuntimeError("MongoDB client is not configured")
        return self.db[self.settings.mongo_collection]

    async def insert_contact(self, submission: ContactSubmission) -> str:
        """
        Insert one contact submission.

        Args:
            submission: Validated contact submission

        Returns:
            str: The inserted document id
        """
        result = await self.collection.insert_one(submission.to_document())
        return str(result.inserted_id)

    def close(self):
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connections closed successfully")


def get_store(request: Request) -> ContactStore:
    """Returns the application's ContactStore"""
    return request.app.state.store
