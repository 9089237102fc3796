from pymongo import MongoClient

from deptboard.core.config import CONFIG
from deptboard.core.logger import get_logger

logger = get_logger("database")

# MongoClient connects lazily, so importing this module never blocks on the server.
# Collections: users, subjects, students, cie_marks (one document per student per subject)
client = MongoClient(CONFIG.MONGO_URI)

db = client[CONFIG.MONGO_DB_NAME]

logger.info("Mongo client configured for database %s", CONFIG.MONGO_DB_NAME)
