import math
from typing import Optional

IMAGE_HOST = "https://image.tmdb.org/t/p"
IMAGE_SIZES = {
    "poster": "w500",
    "backdrop": "original",
    "thumbnail": "w200",
}
PLACEHOLDER_HOST = "https://picsum.photos/seed"


def placeholder_url(item_id: int, kind: str = "poster") -> str:
    # Seeded by item id so the same item always gets the same picture.
    if kind == "backdrop":
        return f"{PLACEHOLDER_HOST}/{item_id}backdrop/1920/1080"
    return f"{PLACEHOLDER_HOST}/{item_id}/300/450"


def resolve_image_url(path: Optional[str], item_id: int, kind: str = "poster") -> str:
    """Resolve an image reference returned by the content backend.

    Relative paths belong to the TMDB image host, absolute URLs are used as
    they are, and anything else falls back to the seeded placeholder. The UI
    swaps to the same placeholder when a resolved URL fails to load.
    """
    if path and path.startswith("/"):
        return f"{IMAGE_HOST}/{IMAGE_SIZES.get(kind, IMAGE_SIZES['poster'])}{path}"
    if path and (path.startswith("http://") or path.startswith("https://")):
        return path
    return placeholder_url(item_id, kind)


def match_percent(vote_average: float) -> int:
    # Half-up, not banker's rounding. Out-of-range ratings pass through.
    return math.floor(vote_average * 10 + 0.5)


def format_match(vote_average: float) -> str:
    return f"{match_percent(vote_average)}%"
