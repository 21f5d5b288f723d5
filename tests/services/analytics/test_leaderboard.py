from datetime import date

from glowboard.schemas.sales_record import SalesRecord, TopSeller
from glowboard.services.analytics.leaderboard import location_day_leaderboard, seller_leaderboard

TODAY = date(2024, 5, 15)
YESTERDAY = date(2024, 5, 14)


def day_record(location, day, daily_sales, treatments=0, sellers=None):
    return SalesRecord(
        location=location,
        date=day,
        daily_sales=daily_sales,
        treatments_count=treatments,
        top_sellers=sellers,
    )


def test_location_leaderboard_ranks_today():
    """Test top three locations of today, ties ordered by name"""
    records = [
        day_record("UWS", TODAY, 800, 4),
        day_record("Midtown", TODAY, 1200, 6),
        day_record("Back Bay", TODAY, 800, 3),
        day_record("Flatiron", TODAY, 300, 1),
        day_record("Miami Beach", YESTERDAY, 5000, 9),
    ]

    board = location_day_leaderboard(records, today=TODAY)

    assert board.is_today is True
    assert board.day == TODAY
    assert [(e.rank, e.location) for e in board.entries] == [
        (1, "Midtown"),
        (2, "Back Bay"),
        (3, "UWS"),
    ]


def test_location_leaderboard_sums_records_per_location():
    """Test that several records of one location on the day form a single entry"""
    records = [
        day_record("UWS", TODAY, 500, 2),
        day_record("UWS", TODAY, 400, 3),
        day_record("Midtown", TODAY, 800, 4),
    ]

    board = location_day_leaderboard(records, today=TODAY)

    assert [(e.location, e.sales, e.treatments) for e in board.entries] == [
        ("UWS", 900, 5),
        ("Midtown", 800, 4),
    ]
    assert all(e.date == TODAY for e in board.entries)


def test_location_leaderboard_falls_back_to_yesterday():
    """Test that yesterday is ranked when today has no records"""
    board = location_day_leaderboard(
        [day_record("UWS", YESTERDAY, 100), day_record("Midtown", date(2024, 5, 13), 900)],
        today=TODAY,
    )

    assert board.is_today is False
    assert board.day == YESTERDAY
    assert [e.location for e in board.entries] == ["UWS"]


def test_location_leaderboard_never_looks_further_back():
    """Test that older data yields an empty board"""
    board = location_day_leaderboard([day_record("UWS", date(2024, 5, 1), 100)], today=TODAY)

    assert board.entries == []
    assert board.day is None


def test_seller_leaderboard_merges_by_name():
    """Test that a seller's sales are summed across locations"""
    records = [
        day_record("UWS", TODAY, 0, sellers=[TopSeller(name="Alice", sales=500, location="A")]),
        day_record("Midtown", TODAY, 0, sellers=[
            TopSeller(name="Alice", sales=300, location="B"),
            TopSeller(name="Bob", sales=650, location="B"),
        ]),
    ]

    ranking = seller_leaderboard(records)

    assert ranking[0].name == "Alice"
    assert ranking[0].sales == 800
    assert ranking[0].location_count == 2
    assert ranking[0].locations == ["A", "B"]
    assert ranking[1].name == "Bob"
    assert ranking[1].rank == 2


def test_seller_leaderboard_limit_and_ties():
    """Test the size limit and name ordering of equal totals"""
    sellers = [TopSeller(name=name, sales=100, location="UWS") for name in "LKJIHGFEDCBA"]

    ranking = seller_leaderboard([day_record("UWS", TODAY, 0, sellers=sellers)])

    assert len(ranking) == 10
    assert [r.name for r in ranking[:3]] == ["A", "B", "C"]
