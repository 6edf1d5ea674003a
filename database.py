"""
Database configuration and session management
PostgreSQL in production with connection pooling, SQLite for local runs and tests
"""

import logging
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str):
    """Create an engine with pool settings suited to the backend"""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=False,
        )

    return create_engine(
        database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,                  # Health check before use
        connect_args={
            "connect_timeout": 30,
            "application_name": "AllReview-Backend",
        },
        echo=False,
    )


engine = build_engine(settings.DATABASE_URL)


# Connection pool monitoring
@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_connection, connection_record, connection_proxy):
    """Monitor connection checkouts"""
    logger.debug(f"Connection checked out. Pool status: {engine.pool.status()}")


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def get_db():
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class DatabaseManager:
    """Database management utilities"""

    @staticmethod
    def create_all_tables():
        """Create all database tables"""
        # Register every model on Base.metadata
        import app.models  # noqa: F401
        Base.metadata.create_all(bind=engine)

    @staticmethod
    def check_connection() -> bool:
        """Run a trivial query against the database"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database connection check failed: {e}")
            return False

