"""Entry point for yearly stats generation"""
import datetime
import json
import logging
import os
import sys
import traceback

from listening_stats.config import settings
from listening_stats.db import db
from listening_stats.services.storage import StorageService
from listening_stats.stats import YearlyStatsAggregator
from listening_stats.utils.json_encoder import json_dumps

logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')
logger = logging.getLogger(__name__)

def run() -> None:
    """Compute the configured user's yearly stats and write them to OUTPUT_DIR."""
    try:
        if not settings.USER_ID:
            raise ValueError("USER_ID setting is required")
        year = settings.YEAR or datetime.date.today().year

        # Initialize database connection
        db.init()

        # Log config (excluding sensitive data)
        logger.info("Using configuration:")
        safe_config = settings.model_dump(exclude={'DB_PASSWORD', 'DATABASE_URL'})
        logger.info(json.dumps(safe_config, indent=2))

        with db.session() as session:
            aggregator = YearlyStatsAggregator(StorageService(session))
            report = aggregator.compute_year_stats(settings.USER_ID, year)

        # Save results
        os.makedirs(settings.OUTPUT_DIR, exist_ok=True)
        output_path = os.path.join(settings.OUTPUT_DIR, f"year_stats_{year}.json")
        with open(output_path, 'w') as f:
            f.write(json_dumps(report, indent=2))

        logger.info(f"Yearly stats written to {output_path}: {json_dumps(report)}")

    except Exception as e:
        logger.error(f"Error during yearly stats generation: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        db.dispose()

if __name__ == "__main__":
    run()
