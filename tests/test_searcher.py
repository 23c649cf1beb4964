"""Tests for ranking naats with search_items / SearchEngine."""

from dataclasses import dataclass

import pytest

from naat_search.analyzer import QueryAnalyzer
from naat_search.search.scoring import ScoringConfig
from naat_search.search.searcher import SearchEngine, search_items


def titles(results):
    return [r["title"] for r in results]


@dataclass
class Track:
    title: str
    channel_name: str | None = None


class TestSearchItems:
    """Tests for the default engine."""

    def test_in_order_ranks_above_out_of_order(self, naat_dicts):
        results = search_items(naat_dicts, "Hai Kalam Ilah Shamsudduha")

        assert titles(results) == [
            "Hai Kalam e Ilah Mein Shamsudduha",
            "Hai Ilah Mein Kalam Shamsudduha",
        ]

    def test_all_words_must_be_present(self, naat_dicts):
        results = titles(search_items(naat_dicts, "Hai Kalam Ilah Shamsudduha"))

        assert "Kalam e Pak" not in results
        assert "Shamsudduha Ka Kalam" not in results
        assert "Beautiful Naat" not in results

    def test_missing_word_excludes_even_with_other_matches(self, naat_dicts):
        assert search_items(naat_dicts, "Kalam Pak Shamsudduha") == []

    def test_exact_phrase_first(self, naat_dicts):
        results = search_items(naat_dicts, "Hai Kalam e Ilah Mein Shamsudduha")

        assert results[0]["title"] == "Hai Kalam e Ilah Mein Shamsudduha"
        assert len(results) == 2

    def test_single_word_matches_many(self, naat_dicts):
        results = search_items(naat_dicts, "kalam")

        # All exact matches: collection order kept
        assert titles(results) == [
            "Hai Kalam e Ilah Mein Shamsudduha",
            "Kalam e Pak",
            "Shamsudduha Ka Kalam",
            "Hai Ilah Mein Kalam Shamsudduha",
        ]

    def test_connector_words_ignored(self, naat_dicts):
        results1 = search_items(naat_dicts, "Kalam Ilah Shamsudduha")
        results2 = search_items(naat_dicts, "Kalam e Ilah Mein Shamsudduha")

        assert len(results1) == len(results2) == 2

    def test_case_insensitive(self, naat_dicts):
        assert search_items(naat_dicts, "KALAM SHAMSUDDUHA") == search_items(
            naat_dicts, "kalam shamsudduha"
        )

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_empty_query(self, naat_dicts, query):
        assert search_items(naat_dicts, query) == []

    @pytest.mark.parametrize("query", ["e ke ka", "the of and", "a b c", "!!"])
    def test_query_without_significant_words(self, naat_dicts, query):
        assert search_items(naat_dicts, query) == []

    def test_order_beats_disorder(self):
        items = [{"title": "Sarkar Noor Madina"}, {"title": "Noor e Madina Sarkar"}]

        results = search_items(items, "Noor Madina Sarkar")

        assert titles(results) == ["Noor e Madina Sarkar", "Sarkar Noor Madina"]

    def test_exact_phrase_beats_out_of_order(self):
        items = [{"title": "Salam Ya Nabi"}, {"title": "Ya Nabi Salam Alaika"}]

        results = search_items(items, "Nabi Salam")

        assert titles(results) == ["Ya Nabi Salam Alaika", "Salam Ya Nabi"]

    def test_channel_match_is_discounted(self, naat_dicts):
        # Channel "Owais Raza Qadri" scores 80 in order, 40 after the discount
        assert search_items(naat_dicts, "Owais Qadri") == []

        results = search_items(naat_dicts, "Owais Qadri", min_score=40)
        assert titles(results) == [
            "Hai Kalam e Ilah Mein Shamsudduha",
            "Shamsudduha Ka Kalam",
            "Hai Ilah Mein Kalam Shamsudduha",
            "Beautiful Naat",
        ]

    def test_channel_exact_match(self, naat_dicts):
        results = search_items(naat_dicts, "Owais Raza Qadri", min_score=50)
        assert len(results) == 4

    def test_channel_search_disabled(self, naat_dicts):
        results = search_items(
            naat_dicts, "Owais Qadri", search_in_channel=False, min_score=40
        )
        assert results == []

    def test_title_match_wins_over_channel(self):
        items = [
            {"title": "Beautiful Naat", "channel_name": "Owais"},
            {"title": "Owais Special", "channel_name": "Someone Else"},
        ]

        results = search_items(items, "Owais", min_score=50)

        assert titles(results) == ["Owais Special", "Beautiful Naat"]

    def test_min_score_is_inclusive_and_monotonic(self, naat_dicts):
        query = "Kalam Shamsudduha"
        strict = search_items(naat_dicts, query, min_score=80)
        loose = search_items(naat_dicts, query, min_score=60)

        assert len(strict) <= len(loose)
        # "Shamsudduha Ka Kalam" is out of order (60)
        assert "Shamsudduha Ka Kalam" in titles(loose)
        assert "Shamsudduha Ka Kalam" not in titles(strict)

    def test_min_score_none_uses_default(self, naat_dicts):
        assert search_items(naat_dicts, "Owais Qadri", min_score=None) == []

    def test_ties_keep_collection_order(self):
        items = [{"title": f"Naat Sharif {i}"} for i in range(10)]

        results = search_items(items, "naat sharif")

        assert results == items

    def test_returns_original_objects(self, naat_dicts):
        results = search_items(naat_dicts, "kalam")

        assert results[0] is naat_dicts[0]

    def test_does_not_mutate_input(self, naat_dicts):
        before = list(naat_dicts)

        search_items(naat_dicts, "Hai Ilah Kalam")

        assert naat_dicts == before
        assert all(a is b for a, b in zip(naat_dicts, before))

    def test_deterministic(self, naat_dicts):
        query = "Ilah Kalam"
        assert search_items(naat_dicts, query) == search_items(naat_dicts, query)

    def test_accepts_models_and_objects(self, naats):
        results = search_items(naats, "kalam pak")
        assert [n.id for n in results] == ["n2"]

        tracks = [Track("Beautiful Naat", "Owais Raza Qadri"), Track("Kalam e Pak")]
        assert search_items(tracks, "Owais Raza Qadri", min_score=50) == [tracks[0]]

    def test_accepts_any_iterable(self, naat_dicts):
        results = search_items(iter(naat_dicts), "kalam")
        assert len(results) == 4

    def test_custom_analyzer(self):
        items = [{"title": "Naat Sharif"}, {"title": "Kalam ke Phool"}]
        no_stop_words = QueryAnalyzer(stop_words=set())

        assert search_items(items, "sharif", analyzer=no_stop_words) == [items[0]]
        assert search_items(items, "naat", analyzer=QueryAnalyzer(stop_words={"naat"})) == []
        # "ke" is only searchable once it is no longer a stop word
        assert search_items(items, "ke", analyzer=no_stop_words) == [items[1]]
        assert search_items(items, "ke") == []

    def test_custom_accessors_and_config(self):
        items = [{"name": "Tajdar e Haram", "reciter": "Sabri Brothers"}]

        results = search_items(
            items,
            "Sabri Brothers",
            title_of=lambda item: item["name"],
            secondary_of=lambda item: item["reciter"],
            config=ScoringConfig(secondary_weight=1.0),
        )

        assert results == items

    def test_options_are_keyword_only(self, naat_dicts):
        with pytest.raises(TypeError):
            search_items(naat_dicts, "kalam", True, 80)

    @pytest.mark.parametrize("min_score", ["high", object(), True, None])
    def test_invalid_min_score_uses_default(self, naat_dicts, min_score):
        # Channel-only matches score 40, below the default floor
        assert search_items(naat_dicts, "Owais Qadri", min_score=min_score) == []
        assert len(search_items(naat_dicts, "kalam", min_score=min_score)) == 4

    def test_numeric_string_min_score(self, naat_dicts):
        assert len(search_items(naat_dicts, "Owais Qadri", min_score="40")) == 4

    def test_search_in_channel_none_uses_default(self, naat_dicts):
        results = search_items(
            naat_dicts, "Owais Qadri", search_in_channel=None, min_score=40
        )
        assert len(results) == 4


class TestSearchEngine:
    def test_custom_accessors(self):
        engine = SearchEngine(
            title_of=lambda item: item["name"],
            secondary_of=lambda item: item.get("reciter"),
        )
        items = [
            {"name": "Tajdar e Haram", "reciter": "Sabri Brothers"},
            {"name": "Mustafa Jaan e Rehmat", "reciter": None},
        ]

        assert engine.search(items, "tajdar haram") == [items[0]]
        assert engine.search(items, "Sabri Brothers", min_score=50) == [items[0]]

    def test_custom_stop_words(self):
        engine = SearchEngine(analyzer=QueryAnalyzer(stop_words={"naat"}))
        items = [{"title": "Naat Sharif"}]

        assert engine.search(items, "naat") == []
        assert engine.search(items, "sharif") == items

    def test_highlight_uses_engine_analyzer(self):
        engine = SearchEngine(analyzer=QueryAnalyzer(stop_words=set()))

        segments = engine.highlight("Kalam ke Phool", "ke")

        assert [s.text for s in segments if s.is_match] == ["ke"]
