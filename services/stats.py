"""
Cooking Statistics Service

Aggregates cook logs and techniques into the numbers shown on the
stats page.
"""

from datetime import datetime, timedelta


def _round1(value):
    return int(value * 10 + 0.5) / 10


def _current_streak(cook_dates, today):
    """Consecutive cooking days ending today or yesterday."""
    days = sorted(set(cook_dates), reverse=True)
    if not days or days[0] not in (today, today - timedelta(days=1)):
        return 0
    streak = 1
    for previous, current in zip(days, days[1:]):
        if (previous - current).days != 1:
            break
        streak += 1
    return streak


def cooking_stats(cook_logs, techniques, total_recipes, now=None):
    """
    Build the stats payload.

    Args:
        cook_logs: CookLog rows with `recipe` loaded
        techniques: Technique rows with `recipes` (RecipeTechnique) loaded
        total_recipes: Number of recipes in the box
        now: Reference time (defaults to now)
    """
    if now is None:
        now = datetime.now()
    logs = sorted(cook_logs, key=lambda log: log.cooked_on)

    total_meals = len(logs)
    total_people_served = sum(log.served_to or 0 for log in logs)

    rating_distribution = {rating: 0 for rating in range(1, 6)}
    for log in logs:
        rating_distribution[log.rating] = rating_distribution.get(log.rating, 0) + 1

    avg_rating = sum(log.rating for log in logs) / total_meals if total_meals else 0
    would_repeat_pct = (len([log for log in logs if log.would_repeat]) / total_meals * 100
                        if total_meals else 0)

    # Cuisine breakdown
    cuisine_counts = {}
    for log in logs:
        cuisine = log.recipe.cuisine or 'Unspecified'
        cuisine_counts[cuisine] = cuisine_counts.get(cuisine, 0) + 1
    top_cuisines = [
        {'cuisine': cuisine, 'count': count}
        for cuisine, count in sorted(cuisine_counts.items(), key=lambda kv: kv[1], reverse=True)[:8]
    ]

    # Per-recipe frequency and average rating
    per_recipe = {}
    for log in logs:
        entry = per_recipe.setdefault(log.recipe_id, {'title': log.recipe.title, 'ratings': []})
        entry['ratings'].append(log.rating)
    recipe_rows = [
        {
            'id': recipe_id,
            'title': entry['title'],
            'count': len(entry['ratings']),
            'avgRating': sum(entry['ratings']) / len(entry['ratings']),
        }
        for recipe_id, entry in per_recipe.items()
    ]
    most_cooked = sorted(recipe_rows, key=lambda r: r['count'], reverse=True)[:5]
    # At least two cooks before a rating means anything
    highest_rated = sorted([r for r in recipe_rows if r['count'] >= 2],
                           key=lambda r: r['avgRating'], reverse=True)[:5]

    monthly_activity = {}
    for log in logs:
        key = log.cooked_on.strftime('%Y-%m')
        monthly_activity[key] = monthly_activity.get(key, 0) + 1

    # Weekly average over the last 12 weeks
    twelve_weeks_ago = now - timedelta(weeks=12)
    recent = [log for log in logs if log.cooked_on >= twelve_weeks_ago]
    avg_meals_per_week = len(recent) / 12

    thirty_days_ago = now - timedelta(days=30)
    last_30_days = len([log for log in logs if log.cooked_on >= thirty_days_ago])

    current_streak = _current_streak([log.cooked_on.date() for log in logs], now.date())

    technique_stats = sorted([
        {
            'id': t.id,
            'name': t.name,
            'comfort': t.comfort,
            'difficulty': t.difficulty,
            'recipesCount': len(t.recipes),
            'timesUsed': sum(len(rt.recipe.cook_logs) for rt in t.recipes if rt.recipe),
        }
        for t in techniques
    ], key=lambda row: row['timesUsed'], reverse=True)

    comfort_distribution = {
        'untried': len([t for t in techniques if t.comfort == 0]),
        'learning': len([t for t in techniques if t.comfort == 1]),
        'comfortable': len([t for t in techniques if t.comfort == 2]),
        'confident': len([t for t in techniques if t.comfort == 3]),
    }

    return {
        'overview': {
            'totalMeals': total_meals,
            'totalRecipes': total_recipes,
            'totalPeopleServed': total_people_served,
            'avgRating': _round1(avg_rating),
            'wouldRepeatPct': int(would_repeat_pct + 0.5),
            'avgMealsPerWeek': _round1(avg_meals_per_week),
            'last30DaysMeals': last_30_days,
            'currentStreak': current_streak,
        },
        'ratingDistribution': rating_distribution,
        'topCuisines': top_cuisines,
        'mostCooked': most_cooked,
        'highestRated': highest_rated,
        'monthlyActivity': monthly_activity,
        'techniqueStats': technique_stats,
        'comfortDistribution': comfort_distribution,
    }
