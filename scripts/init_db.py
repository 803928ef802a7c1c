# scripts/init_db.py
"""
Create the invoicebook tables in the configured database (DATABASE_URL).

Usage:
    python -m scripts.init_db          # create missing tables
    python -m scripts.init_db --drop   # drop everything first
"""

import argparse
import logging

from invoicebook.db.engine import get_engine
from invoicebook.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--drop", action="store_true", help="drop all tables before creating them")
    args = parser.parse_args(argv)

    engine = get_engine()
    if args.drop:
        metadata.drop_all(engine)
        logger.warning("Dropped all tables on %s", engine.url.render_as_string(hide_password=True))
    metadata.create_all(engine)
    logger.info("DB schema created (%d tables).", len(metadata.tables))


if __name__ == "__main__":
    main()
