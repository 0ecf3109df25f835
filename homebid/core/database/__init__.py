from .database import DatabaseManager
