"""
Tests for the cooking statistics aggregation.
"""

from datetime import timedelta
from types import SimpleNamespace

from services.stats import _current_streak, cooking_stats


def test_empty_history(make_technique, now):
    stats = cooking_stats([], [make_technique("braising")], total_recipes=3, now=now)

    assert stats["overview"] == {
        "totalMeals": 0,
        "totalRecipes": 3,
        "totalPeopleServed": 0,
        "avgRating": 0,
        "wouldRepeatPct": 0,
        "avgMealsPerWeek": 0,
        "last30DaysMeals": 0,
        "currentStreak": 0,
    }
    assert stats["ratingDistribution"] == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert stats["comfortDistribution"]["untried"] == 1


def test_overview_and_rankings(make_log, make_technique, now):
    tacos = SimpleNamespace(id=1, title="Tacos", cuisine="Mexican")
    curry = SimpleNamespace(id=2, title="Curry", cuisine="Thai")
    logs = [
        make_log(5, now - timedelta(days=1), served_to=4, recipe=tacos),
        make_log(4, now - timedelta(days=2), served_to=2, recipe=tacos),
        make_log(2, now - timedelta(days=50), would_repeat=False, recipe=curry),
    ]
    tacos.cook_logs = logs[:2]
    curry.cook_logs = logs[2:]
    techniques = [
        make_technique("searing", comfort=3, id=1, recipes=[SimpleNamespace(recipe=tacos)]),
        make_technique("braising", comfort=1, id=2, recipes=[SimpleNamespace(recipe=curry)]),
    ]

    stats = cooking_stats(logs, techniques, total_recipes=2, now=now)
    overview = stats["overview"]

    assert overview["totalMeals"] == 3
    assert overview["totalPeopleServed"] == 6
    assert overview["avgRating"] == 3.7
    assert overview["wouldRepeatPct"] == 67
    assert overview["avgMealsPerWeek"] == 0.3
    assert overview["last30DaysMeals"] == 2
    assert overview["currentStreak"] == 2

    assert stats["topCuisines"] == [{"cuisine": "Mexican", "count": 2}, {"cuisine": "Thai", "count": 1}]
    assert stats["mostCooked"][0] == {"id": 1, "title": "Tacos", "count": 2, "avgRating": 4.5}
    assert [r["id"] for r in stats["highestRated"]] == [1]
    assert stats["ratingDistribution"][5] == 1
    assert [t["name"] for t in stats["techniqueStats"]] == ["searing", "braising"]
    assert stats["techniqueStats"][0]["timesUsed"] == 2
    assert stats["comfortDistribution"] == {"untried": 0, "learning": 1, "comfortable": 0, "confident": 1}


def test_streak(now):
    today = now.date()

    assert _current_streak([], today) == 0
    assert _current_streak([today, today - timedelta(days=1), today - timedelta(days=3)], today) == 2
    assert _current_streak([today - timedelta(days=1), today - timedelta(days=2)], today) == 2
    assert _current_streak([today - timedelta(days=2)], today) == 0
