from datetime import datetime, timezone

from tinylinks.core.context import AppContext
from tinylinks.utils.encoding import format_uptime


def health_report(context: AppContext) -> dict:
    # Storage is not probed here; see database.verify_database_connection for that.
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {
        "status": "OK",
        "uptime": format_uptime(context.uptime_seconds()),
        "timestamp": timestamp,
        "environment": context.settings.ENVIRONMENT,
        "database": "Connected",
    }
