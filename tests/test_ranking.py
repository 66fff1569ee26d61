import pytest

from quicklaunch import ranking
from quicklaunch.models import AppEntry
from quicklaunch.ranking import (
    TIER_EXACT,
    TIER_INITIALS,
    TIER_PREFIX,
    TIER_SUBSTRING,
    Catalog,
    FuzzyConfig,
    classify,
    initials,
    initials_match,
    match_span,
    rank,
    tier_of,
)

from .conftest import CHROME, VSCODE, WECHAT, app


def test_initials_splits_on_spaces_dashes_underscores_and_dots():
    assert initials("Visual Studio Code") == "vsc"
    assert initials("my-cool_app.exe") == "mcae"
    assert initials("") == ""


@pytest.mark.parametrize(
    "name, query, expected",
    [
        ("Visual Studio Code", "vsc", True),
        ("Visual Studio Code", "sc", True),
        ("Visual Studio Code", "v s c", True),
        ("Visual Studio Code", "VSC", True),
        ("Visual Studio Code", "vc", False),
        ("Visual Studio Code", "", False),
        ("Visual Studio Code", "   ", False),
        ("Notepad", "n", True),
    ],
)
def test_initials_match(name, query, expected):
    assert initials_match(name, query) is expected


def test_tier_of_prefers_the_strongest_relation():
    assert tier_of("Code", "code") == TIER_EXACT
    assert tier_of("Code Runner", "CODE") == TIER_PREFIX
    assert tier_of("VS Code", "code") == TIER_SUBSTRING
    assert tier_of("Visual Studio Code", "vsc") == TIER_INITIALS
    assert tier_of("Paint", "zzz") is None


def test_initials_query_returns_only_the_matching_app(corpus):
    assert rank(corpus, "vsc") == [VSCODE]


def test_substring_query_returns_only_chrome(corpus):
    assert rank(corpus, "chro") == [CHROME]


def test_typo_falls_back_to_fuzzy(corpus):
    results = rank(corpus, "chrme")
    assert results[0] == CHROME


def test_empty_query_returns_head_of_roster_in_order():
    roster = [app(f"App {i:02d}") for i in range(12)]
    assert rank(roster, "") == roster[:8]
    assert rank(roster, "   ") == roster[:8]
    assert rank(roster[:3], "") == roster[:3]


def test_direct_tiers_sort_before_each_other_regardless_of_roster_order():
    editor = app("Nice Old Text Editor")
    onenote = app("OneNote")
    notepad = app("Notepad")
    note = app("Note")
    results = rank([editor, onenote, notepad, note], "note")
    assert results[:4] == [note, notepad, onenote, editor]


def test_exact_match_ranks_first():
    runner = app("Code Runner")
    code = app("Code")
    assert rank([runner, code], "code")[0] == code


def test_equal_tiers_keep_roster_order():
    mail = app("Alpha Mail")
    notes = app("Alpha Notes")
    assert rank([notes, mail], "alpha")[:2] == [notes, mail]
    assert rank([mail, notes], "alpha")[:2] == [mail, notes]


def test_fuzzy_matches_follow_direct_matches_without_duplicates():
    firefox = app("Firefox")
    fiore = app("Fiore Editor")
    results = rank([fiore, firefox, CHROME], "fire")
    assert results[0] == firefox
    assert fiore in results
    assert results.count(firefox) == 1


def test_category_can_match_through_fuzzy_fallback():
    paint = app("Paint", category="Accessories")
    assert paint in rank([paint, CHROME], "accessories")


def test_category_weight_zero_disables_category_matching():
    paint = app("Paint", category="Accessories")
    catalog = Catalog([paint, CHROME], fuzzy=FuzzyConfig(category_weight=0))
    assert paint not in catalog.search("accessories")


def test_zero_threshold_only_allows_perfect_fuzzy_matches(corpus):
    catalog = Catalog(corpus, fuzzy=FuzzyConfig(threshold=0.0))
    assert catalog.search("chrme") == []


def test_results_are_capped_and_unique():
    roster = [app(f"Tool {i}") for i in range(20)]
    roster.append(roster[0])  # same path twice
    for query in ("tool", "t", "tol", "1", "to 1"):
        results = rank(roster, query)
        assert len(results) <= 8
        assert len({e.path for e in results}) == len(results)


def test_classify_drops_duplicate_paths():
    dup = AppEntry(name="Chrome Beta", path=CHROME.path)
    ranked = classify([CHROME, dup], "chrome")
    assert [r.entry for r in ranked] == [CHROME]


def test_no_match_returns_empty_list(corpus):
    assert rank(corpus, "zzzzqqq") == []


@pytest.mark.parametrize("threshold", [-0.1, 1.5])
def test_fuzzy_config_rejects_out_of_range_threshold(threshold):
    with pytest.raises(ValueError):
        FuzzyConfig(threshold=threshold)


def test_fuzzy_config_from_dict():
    cfg = FuzzyConfig.from_dict({"threshold": 0.2})
    assert cfg.threshold == 0.2
    assert cfg.name_weight == 1.0
    assert cfg.score_cutoff == pytest.approx(80.0)
    with pytest.raises(ValueError):
        FuzzyConfig.from_dict({"threshold": "high"})
    with pytest.raises(ValueError):
        FuzzyConfig.from_dict({"name_weight": True})


def test_catalog_reuses_index_between_searches(corpus, monkeypatch):
    catalog = Catalog(corpus)

    def boom(*args, **kwargs):
        raise AssertionError("index rebuilt during search")

    monkeypatch.setattr(ranking, "FuzzyIndex", boom)
    assert catalog.search("chrme")[0] == CHROME
    assert catalog.search("vsc") == [VSCODE]


def test_catalog_refresh_reports_changes(corpus):
    catalog = Catalog(corpus)
    assert catalog.refresh(list(corpus)) is False
    assert catalog.refresh(corpus + [app("Paint")]) is True
    assert catalog.default_results()[-1].name == "Paint"
    assert catalog.search("wech")[0] == WECHAT


def test_match_span_finds_first_case_insensitive_occurrence():
    assert match_span("Google Chrome", "CHRO") == (7, 11)
    assert match_span("Google Chrome", "  chro ") == (7, 11)
    assert match_span("Visual Studio Code", "vsc") is None
    assert match_span("Google Chrome", "") is None
