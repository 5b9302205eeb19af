# init_db.py

import logging

from app.db.session import Base, engine
import app.db.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger("init_db")


def init():
    logger.info("Creating tables (if not exist) on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    logger.info("Done.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
