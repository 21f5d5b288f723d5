from datetime import date, date as date_type, timedelta
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from glowboard.schemas.sales_record import SalesRecord
from glowboard.services.analytics.date_ranges import local_today

LOCATION_LEADERBOARD_SIZE = 3
SELLER_LEADERBOARD_SIZE = 10


class LeaderboardEntry(BaseModel):
    rank: int
    location: str
    sales: float
    treatments: int
    date: date_type


class LocationDayLeaderboard(BaseModel):
    # Day the ranking covers; None when neither today nor yesterday has data
    day: Optional[date] = None
    is_today: bool = False
    entries: List[LeaderboardEntry] = Field(default_factory=list)


class SellerRanking(BaseModel):
    rank: int
    name: str
    sales: float
    locations: List[str] = Field(default_factory=list)
    location_count: int = 0


def location_day_leaderboard(
    records: Sequence[SalesRecord],
    today: Optional[date] = None,
    limit: int = LOCATION_LEADERBOARD_SIZE
) -> LocationDayLeaderboard:
    """Rank locations by their sales of today, or of yesterday when today has none.

    Records of the same location on that day are summed into one entry.
    Never looks further back than yesterday. Equal sales are ordered by
    location name.
    """
    today = today or local_today()
    yesterday = today - timedelta(days=1)

    todays = [record for record in records if record.date == today]
    target = todays or [record for record in records if record.date == yesterday]
    if not target:
        return LocationDayLeaderboard()

    day = today if todays else yesterday
    totals: Dict[str, List[float]] = {}
    for record in target:
        total = totals.setdefault(record.location, [0.0, 0])
        total[0] += record.daily_sales or 0
        total[1] += record.treatments_count or 0

    ranked = sorted(totals.items(), key=lambda item: (-item[1][0], item[0]))
    entries = [
        LeaderboardEntry(
            rank=index + 1,
            location=location,
            sales=sales,
            treatments=treatments,
            date=day,
        )
        for index, (location, (sales, treatments)) in enumerate(ranked[:limit])
    ]
    return LocationDayLeaderboard(
        day=day,
        is_today=bool(todays),
        entries=entries,
    )


def seller_leaderboard(
    records: Sequence[SalesRecord],
    limit: int = SELLER_LEADERBOARD_SIZE
) -> List[SellerRanking]:
    """Rank individual sellers by sales accumulated over every record.

    Sellers are merged by exact name across locations; each entry keeps the
    locations it was seen at. Equal totals are ordered by name.
    """
    totals: Dict[str, float] = {}
    locations: Dict[str, List[str]] = {}

    for record in records:
        for seller in record.top_sellers or []:
            totals[seller.name] = totals.get(seller.name, 0) + (seller.sales or 0)
            seen = locations.setdefault(seller.name, [])
            if seller.location and seller.location not in seen:
                seen.append(seller.location)

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        SellerRanking(
            rank=index + 1,
            name=name,
            sales=sales,
            locations=locations[name],
            location_count=len(locations[name]),
        )
        for index, (name, sales) in enumerate(ranked[:limit])
    ]
