import datetime
from listening_stats.config import settings
from listening_stats.db import db
from listening_stats.services.storage import StorageService
from listening_stats.stats import YearlyStatsAggregator
from listening_stats.utils.json_encoder import json_dumps

# Initialize database
db.init()

year = settings.YEAR or datetime.date.today().year

try:
    with db.session() as session:
        aggregator = YearlyStatsAggregator(StorageService(session))
        report = aggregator.compute_year_stats(settings.USER_ID, year)
finally:
    db.dispose()

# Print results
print(json_dumps(report, indent=2))
