from datetime import datetime, timezone
from typing import Optional, Tuple

from fastapi import status

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode


def parse_date_range(value: Optional[str]) -> Optional[Tuple[datetime, datetime]]:
    """Parse `<iso start>,<iso end>` into a (start, end) tuple."""
    if not value:
        return None
    parts = [part.strip() for part in value.split(",")]
    try:
        if len(parts) != 2:
            raise ValueError(value)
        start, end = (datetime.fromisoformat(part.replace("Z", "+00:00"))
                      for part in parts)
    except ValueError:
        return error_response(
            message="expirationBetween must be '<start>,<end>' ISO dates",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
    start, end = (moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)
                  for moment in (start, end))
    if end < start:
        start, end = end, start
    return start, end
