from fruitbowl.languages import calculate_weights, init_languages, main


def test_init_languages_holds_known_years():
    languages = init_languages()
    assert len(languages) == 14
    assert languages["Rust"] == 2010
    assert languages["C"] == 1972


def test_oldest_is_100_and_newest_is_1():
    weights = calculate_weights(init_languages())
    assert weights["C"] == 100
    assert weights["TypeScript"] == 1


def test_weights_within_range_and_keys_kept():
    languages = init_languages()
    weights = calculate_weights(languages)
    assert set(weights) == set(languages)
    assert all(1 <= weight <= 100 for weight in weights.values())


def test_older_languages_weigh_at_least_as_much():
    languages = init_languages()
    weights = calculate_weights(languages)
    by_year = sorted(languages, key=languages.get)
    ordered = [weights[language] for language in by_year]
    assert ordered == sorted(ordered, reverse=True)


def test_same_year_same_weight():
    weights = calculate_weights(init_languages())
    assert weights["JavaScript"] == weights["Java"] == weights["PHP"]


def test_input_is_not_modified():
    languages = init_languages()
    calculate_weights(languages)
    assert languages == init_languages()


def test_single_language_weighs_one():
    assert calculate_weights({"Rust": 2010}) == {"Rust": 1}


def test_empty_mapping_gives_no_weights():
    assert calculate_weights({}) == {}


def test_main_prints_every_language(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Language weighing from 1-100 by age (1 is newest and 100 is oldest):"
    assert "C: 100" in lines
    assert "TypeScript: 1" in lines
    assert len(lines) == 1 + len(init_languages())