import os
import pathlib
from typing import Any, Dict, Optional
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv

# load backend/.env
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))

MONGODB_URI = os.getenv("MONGODB_URI")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "mockInterviewDB")

if not MONGODB_URI:
    raise RuntimeError("MONGODB_URI not set in backend/.env")

client = AsyncIOMotorClient(MONGODB_URI)
db = client[MONGO_DB_NAME]


class DocumentNotFoundError(LookupError):
    pass


def archives_path(user_id: str) -> str:
    return f"users/{user_id}/archives"


def collection_for(collection_path: str):
    """Map a slash-separated path like users/<uid>/archives onto a collection."""
    parts = [p for p in collection_path.split("/") if p]
    if not parts:
        raise ValueError("collection path must not be empty")
    return db[".".join(parts)]


async def get_document(collection_path: str, doc_id: str) -> Optional[Dict[str, Any]]:
    """Fetch a whole document, or None if it does not exist."""
    return await collection_for(collection_path).find_one({"_id": doc_id})


async def update_document(collection_path: str, doc_id: str, fields: Dict[str, Any]) -> None:
    """Partial update: only the given top-level fields are overwritten."""
    result = await collection_for(collection_path).update_one({"_id": doc_id}, {"$set": fields})
    if result.matched_count == 0:
        raise DocumentNotFoundError(f"No document to update at {collection_path}/{doc_id}")
