from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.core.config import settings

_client: AsyncIOMotorClient = None
_database: AsyncIOMotorDatabase = None


async def init_mongo_client() -> None:
    global _client, _database
    if _client is None:
        _client = AsyncIOMotorClient(settings.MONGO_URI, uuidRepresentation="standard")
    if _database is None:
        _database = _client[settings.MONGO_DB_NAME]


async def close_mongo_client() -> None:
    global _client, _database
    if _client is not None:
        _client.close()
    _client = None
    _database = None


def _get_collection(collection_name: str) -> AsyncIOMotorCollection:
    global _client, _database
    if _client is None:
        _client = AsyncIOMotorClient(settings.MONGO_URI, uuidRepresentation="standard")
    if _database is None:
        _database = _client[settings.MONGO_DB_NAME]
    return _database[collection_name]


def get_user_collection() -> AsyncIOMotorCollection:
    return _get_collection("user")


def get_expense_collection() -> AsyncIOMotorCollection:
    return _get_collection("expense")


def get_feedback_collection() -> AsyncIOMotorCollection:
    return _get_collection("feedback")
