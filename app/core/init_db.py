"""
Database initialization script.
Creates all tables and optionally seeds demo visitors.
"""

from sqlalchemy import inspect
from app.core.database import engine, Base, SessionLocal
from app.models.visitor import Visitor
from app.models.visitor_template import VisitorTemplate  # noqa: F401
import logging

logger = logging.getLogger(__name__)

DEMO_VISITORS = [
    {"name": "John Smith", "phone": "9876543210", "qr_token": "VIS-DEMO00000001", "otp": "1234"},
    {"name": "Sarah Johnson", "phone": "9876543211", "qr_token": "VIS-DEMO00000002", "otp": "5678"},
    {"name": "Mike Wilson", "phone": "9876543212", "qr_token": "VIS-DEMO00000003", "otp": "9012"},
]


def init_db():
    """
    Initialize the database by creating all tables.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully!")


def seed_initial_data():
    """
    Seed the database with demo visitors when the visitors table is empty.
    """
    db = SessionLocal()

    try:
        existing_visitors = db.query(Visitor).count()

        if existing_visitors == 0:
            logger.info("No visitors found. Creating demo visitors...")
            for demo in DEMO_VISITORS:
                db.add(Visitor(arrived=False, **demo))
            db.commit()
            logger.info(f"Created {len(DEMO_VISITORS)} demo visitors (OTPs: {', '.join(d['otp'] for d in DEMO_VISITORS)})")
        else:
            logger.info(f"Database already has {existing_visitors} visitor(s). Skipping seed data.")

    except Exception as e:
        logger.error(f"Error seeding initial data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def check_tables():
    """
    Check which tables exist in the database.
    """
    inspector = inspect(engine)
    tables = inspector.get_table_names()

    logger.info("Existing tables in database:")
    for table in tables:
        logger.info(f"  - {table}")

    return tables


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    logger.info("=" * 50)
    logger.info("Database Initialization Script")
    logger.info("=" * 50)

    check_tables()
    init_db()
    seed_initial_data()
    check_tables()

    logger.info("=" * 50)
    logger.info("Database initialization complete!")
    logger.info("=" * 50)
