"""Domain entity — a single marketing video case in the library."""

from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlparse

# Values offered by the case editor; the fields themselves stay open strings.
SUGGESTED_CATEGORIES = ("Promo", "Catering", "Retail", "Cleaning", "Other")
SUGGESTED_ROBOT_TYPES = (
    "BellaBot",
    "KettyBot",
    "PuduBot",
    "HolaBot",
    "FlashBot",
    "CC1",
    "SH1",
)

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class VideoCase:
    """Core domain entity for one library entry.

    The id is assigned by the store when the case is created and never
    changes afterwards; updates replace every other field.
    """

    id: str
    category: str
    region: str
    robot_type: str
    client_name: str
    video_url: str
    rating: int
    keywords: list[str] = field(default_factory=list)
    subcategory: str | None = None
    description: str | None = None

    def thumbnail_url(self) -> str:
        """Preview image for the card grid.

        YouTube links map to the video's hqdefault frame; anything else
        gets a placeholder seeded by the case id so it stays stable.
        """
        video_id = _youtube_video_id(self.video_url)
        if video_id:
            return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
        return f"https://picsum.photos/seed/{self.id}/400/225"


def _youtube_video_id(url: str) -> str | None:
    parsed = urlparse(url)
    host = parsed.netloc.lower()
    if host.endswith("youtu.be"):
        return parsed.path.lstrip("/").split("/")[0] or None
    if host.endswith("youtube.com"):
        values = parse_qs(parsed.query).get("v")
        if values and values[0]:
            return values[0]
    return None
