from datetime import timedelta

from services.history import build_cuisine_history, build_technique_comfort


def test_cuisine_history_keeps_latest_cook(make_recipe, make_log, now):
    recipes = [
        make_recipe(id=1, cuisine="Mexican", cook_logs=[make_log(4, now - timedelta(days=40))]),
        make_recipe(id=2, cuisine="mexican", cook_logs=[make_log(3, now - timedelta(days=5)),
                                                        make_log(5, now - timedelta(days=60))]),
        make_recipe(id=3, cuisine="Thai"),
        make_recipe(id=4, cuisine=None, cook_logs=[make_log(5, now)]),
    ]
    history = build_cuisine_history(recipes)

    assert history == {"mexican": now - timedelta(days=5)}


def test_technique_comfort_map(make_technique):
    techniques = [make_technique("Knife_Skills", comfort=3), make_technique("Braising", comfort=1)]

    assert build_technique_comfort(techniques) == {"knife skills": 3, "braising": 1}
