from typing import Any, Dict, Optional
from urllib.parse import urlencode

from fastapi import Request

from shared.core.config import settings


def get_pagination_url(
    base_url: str,
    page: int,
    limit: int,
    count: int,
    **filters: Any
) -> Dict[str, Optional[str]]:
    """
    Build the next/previous links of a paginated listing.

    `next` is None once the current page reaches the end of `count`,
    `previous` is None on the first page. Non-empty filters are kept
    in both links so the client stays on the same filtered listing.
    """
    start_index = (page - 1) * limit
    end_index = page * limit

    extra = urlencode({k: v for k, v in filters.items() if v not in (None, "")})
    suffix = f"&{extra}" if extra else ""

    next_url = f"{base_url}?page={page + 1}&limit={limit}{suffix}" if end_index < count else None
    previous_url = f"{base_url}?page={page - 1}&limit={limit}{suffix}" if start_index > 0 else None

    return {"next": next_url, "previous": previous_url}


def get_base_url(request: Request) -> str:
    return settings.API_URL.rstrip("/") + request.url.path


def paginate(request: Request, results: list, page: int, limit: int, count: int, **filters: Any) -> dict:
    links = get_pagination_url(get_base_url(request), page, limit, count, **filters)
    return {
        "results": results,
        "count": count,
        "next": links["next"],
        "previous": links["previous"],
    }
