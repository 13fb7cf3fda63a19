"""
Database initialization module for the contact backend.
Ensures the contacts collection exists once MongoDB is reachable.
Safe to call multiple times - it only creates what's missing.
"""

import logging
from pymongo.errors import PyMongoError

# Set up logger
logger = logging.getLogger(__name__)


async def collection_exists(db, collection_name):
    """
    Check if a collection exists in the database.

    Args:
        db: MongoDB database connection
        collection_name (str): Name of the collection to check

    Returns:
        bool: True if collection exists, False otherwise
    """
    collections = await db.list_collection_names()
    return collection_name in collections


async def initialize_database(db, collection_name: str) -> bool:
    """
    Create the contacts collection if it doesn't exist yet.

    Args:
        db: MongoDB database connection
        collection_name (str): Name of the contacts collection

    Returns:
        bool: True if the collection is in place, False otherwise
    """
    try:
        if await collection_exists(db, collection_name):
            logger.info(f"✅ Collection '{collection_name}' already exists")
            return True

        logger.info(f"🔄 Creating collection '{collection_name}'")
        await db.create_collection(collection_name)
        logger.info(f"✅ Collection '{collection_name}' created successfully")
        return True

    except PyMongoError as e:
        logger.error(f"❌ MongoDB error during database initialization: {str(e)}")
        return False
    except Exception as e:
        logger.error(f"❌ Unexpected error during database initialization: {str(e)}")
        return False
