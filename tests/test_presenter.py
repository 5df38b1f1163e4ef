from conftest import make_recipe as r

from recipe_finder.services.presenter import NO_MATCHES, build_summary, present, sort_by_name, summarize


def entries(lines):
    return [l for l in lines if l[:1].isdigit()]


def test_present_truncates_to_ten():
    recipes = [r(i, name=f"Dish {i:02d}") for i in range(15)]
    lines = present(recipes)
    assert len(entries(lines)) == 10
    assert "...and 5 more" in lines


def test_present_no_matches_message():
    lines = present([])
    assert NO_MATCHES in lines
    assert entries(lines) == []


def test_present_sorts_by_name():
    lines = present([r("1", name="Pilaf"), r("2", name="Curry"), r("3", name="Jambalaya")])
    assert entries(lines) == [
        "1. Curry (ID: 2)",
        "2. Jambalaya (ID: 3)",
        "3. Pilaf (ID: 1)",
    ]


def test_present_exactly_limit_has_no_remainder():
    lines = present([r(i) for i in range(10)])
    assert len(entries(lines)) == 10
    assert not any("more" in l for l in lines)


def test_present_custom_limit():
    lines = present([r(i) for i in range(4)], max_results=3)
    assert len(entries(lines)) == 3
    assert "...and 1 more" in lines


def test_sort_does_not_mutate_input():
    data = [r("1", name="b"), r("2", name="a")]
    assert [x.name for x in sort_by_name(data)] == ["a", "b"]
    assert [x.name for x in data] == ["b", "a"]


def test_build_summary_stats():
    s = build_summary(["chicken", "rice", "peas"], [r("1", name="Paella"), r("2", name="Risotto")])
    assert s.ingredient_count == 3
    assert s.recipe_count == 2
    assert s.total_name_chars == len("Paella") + len("Risotto")
    assert s.used_many_ingredients is True
    assert s.has_results is True


def test_summarize_lines_without_results():
    lines = summarize(["chicken", "rice"], [])
    assert "Ingredients: chicken, rice" in lines
    assert "Ingredient count: 2" in lines
    assert "Found recipes: 0" in lines
    assert "Total recipe name characters: 0" in lines
    assert "Used 3+ ingredients? No" in lines
    assert "Any results? No" in lines


def test_sort_ignores_case_and_accents():
    data = [r("1", "Ćevapi"), r("2", "Beef Stew"), r("3", "apple frangipan tart"), r("4", "Dal fry")]
    assert [x.name for x in sort_by_name(data)] == ["apple frangipan tart", "Beef Stew", "Ćevapi", "Dal fry"]


def test_present_lists_lowercase_names_alphabetically():
    lines = present([r("1", "tuna nicoise"), r("2", "Apam balik"), r("3", "Écureuil pie"), r("4", "kumpir")])
    assert entries(lines) == [
        "1. Apam balik (ID: 2)",
        "2. Écureuil pie (ID: 3)",
        "3. kumpir (ID: 4)",
        "4. tuna nicoise (ID: 1)",
    ]
