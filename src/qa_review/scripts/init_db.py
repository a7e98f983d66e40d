# src/qa_review/scripts/init_db.py
"""Create or reset the schema without going through Alembic."""
from __future__ import annotations

import argparse
import logging

from qa_review.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create the Q&A review tables")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop every table before creating them again.",
    )
    args = parser.parse_args(argv)

    if args.drop:
        drop_tables()
        logger.info("Dropped all tables")
    create_tables()
    logger.info("Tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
