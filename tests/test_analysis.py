"""Tests pour les fonctions d'analyse (filtre, sessions, agrégats)."""

import pytest

from src.analysis.filters import (
    compute_pick_rate,
    filter_by_class,
    format_pick_rate,
    list_player_classes,
)
from src.analysis.sessions import count_sessions, latest_per_session
from src.analysis.stats import (
    compute_floor_histogram,
    compute_top_cards,
    compute_top_combos,
    compute_top_enemies,
    compute_top_trinkets,
    rank_counts,
)
from src.models import TelemetryRecord


def _rec(**kw) -> TelemetryRecord:
    return TelemetryRecord.from_dict(kw)


@pytest.fixture
def mixed_records() -> list[TelemetryRecord]:
    return [
        _rec(sessionId="s1", timestamp=1, playerClass="kitsunagi", floor=2),
        _rec(sessionId="s1", timestamp=2, playerClass="kitsunagi", floor=3),
        _rec(sessionId="s2", timestamp=1, playerClass="ronin", floor=1),
        _rec(sessionId="s3", timestamp=5, floor=4),
    ]


class TestFilterByClass:
    """Tests pour filter_by_class."""

    def test_all_is_identity(self, mixed_records):
        """"all" retourne les enregistrements inchangés."""
        out = filter_by_class(mixed_records, "all")
        assert out == mixed_records
        assert out is not mixed_records

    def test_concrete_class(self, mixed_records):
        """Ne garde que la classe demandée."""
        out = filter_by_class(mixed_records, "kitsunagi")
        assert [r.session_id for r in out] == ["s1", "s1"]

    def test_missing_class_never_matches(self, mixed_records):
        """Une classe absente ne correspond à rien."""
        out = filter_by_class(mixed_records, "ronin")
        assert all(r.player_class == "ronin" for r in out)
        assert len(out) == 1

    def test_unknown_class_is_empty(self, mixed_records):
        """Classe inconnue : liste vide, pas d'erreur."""
        assert filter_by_class(mixed_records, "nobody") == []

    def test_does_not_mutate_input(self, mixed_records):
        before = list(mixed_records)
        filter_by_class(mixed_records, "ronin")
        assert mixed_records == before


class TestPickRate:
    """Tests pour compute_pick_rate / format_pick_rate."""

    def test_all_has_no_pick_rate(self, mixed_records):
        assert compute_pick_rate(mixed_records, "all") is None
        assert format_pick_rate(None) == "Pick rate : —"

    def test_rate_ignores_records_without_class(self, mixed_records):
        """Le dénominateur ne compte que les enregistrements avec classe (3)."""
        assert compute_pick_rate(mixed_records, "kitsunagi") == pytest.approx(66.7)
        assert compute_pick_rate(mixed_records, "ronin") == pytest.approx(33.3)

    def test_no_class_at_all(self):
        assert compute_pick_rate([_rec(sessionId="a")], "kitsunagi") == 0.0

    def test_format(self):
        assert format_pick_rate(12.5) == "Pick rate : 12.5%"


class TestListPlayerClasses:
    def test_merges_known_and_data(self, mixed_records):
        assert list_player_classes(mixed_records, ["zealot"]) == ["kitsunagi", "ronin", "zealot"]

    def test_excludes_all_sentinel(self):
        assert list_player_classes([_rec(sessionId="a", playerClass="all")]) == []


class TestLatestPerSession:
    """Tests pour latest_per_session."""

    def test_picks_max_timestamp(self):
        records = [
            _rec(sessionId="s", timestamp=3, floor=5),
            _rec(sessionId="s", timestamp=1, floor=1),
            _rec(sessionId="s", timestamp=2, floor=3),
        ]
        out = latest_per_session(records)
        assert len(out) == 1
        assert out[0].floor == 5

    def test_tie_last_seen_wins(self):
        records = [
            _rec(sessionId="s", timestamp=2, floor=1),
            _rec(sessionId="s", timestamp=2, floor=4),
        ]
        assert latest_per_session(records)[0].floor == 4

    def test_missing_timestamp_is_oldest(self):
        records = [
            _rec(sessionId="s", timestamp=1, floor=2),
            _rec(sessionId="s", floor=9),
        ]
        assert latest_per_session(records)[0].floor == 2

    def test_one_record_per_session_in_first_seen_order(self, mixed_records):
        out = latest_per_session(mixed_records)
        assert [r.session_id for r in out] == ["s1", "s2", "s3"]
        assert count_sessions(mixed_records) == 3

    def test_empty(self):
        assert latest_per_session([]) == []


class TestFloorHistogram:
    """Tests pour compute_floor_histogram."""

    def test_only_latest_floor_counts(self):
        """3 snapshots (floors 1, 3, 5) d'une même session -> un seul "5+"."""
        records = [
            _rec(sessionId="s", timestamp=1, playerClass="k", floor=1),
            _rec(sessionId="s", timestamp=2, playerClass="k", floor=3),
            _rec(sessionId="s", timestamp=3, playerClass="k", floor=5),
        ]
        assert compute_floor_histogram(records, "k") == [0, 0, 0, 0, 1]

    def test_binning(self):
        records = [
            _rec(sessionId=str(i), timestamp=1, floor=f)
            for i, f in enumerate([1, 2, 2, 3, 4, 5, 7, 12])
        ]
        assert compute_floor_histogram(records, "all") == [1, 2, 1, 1, 3]

    def test_floor_zero_and_missing_excluded(self):
        records = [
            _rec(sessionId="a", timestamp=1, floor=0),
            _rec(sessionId="b", timestamp=1),
            _rec(sessionId="c", timestamp=1, floor=2),
        ]
        counts = compute_floor_histogram(records, "all")
        assert counts == [0, 1, 0, 0, 0]
        assert sum(counts) < count_sessions(records)

    def test_oversized_floor_stays_local(self):
        """Un étage hors int64 compte en "5+" sans casser les autres sessions."""
        records = [
            _rec(sessionId="a", timestamp=1, floor="99999999999999999999"),
            _rec(sessionId="b", timestamp=1, floor="-99999999999999999999"),
            _rec(sessionId="c", timestamp=1, floor=2),
        ]
        assert compute_floor_histogram(records, "all") == [0, 1, 0, 0, 1]

    def test_string_floor(self):
        assert compute_floor_histogram([_rec(sessionId="a", floor="3")], "all") == [0, 0, 1, 0, 0]

    def test_empty(self):
        assert compute_floor_histogram([], "all") == [0, 0, 0, 0, 0]


class TestTopCombos:
    """Tests pour compute_top_combos."""

    def test_accumulates_across_all_records(self):
        """Pas de réduction par session : les compteurs se cumulent."""
        records = [
            _rec(sessionId="s", timestamp=1, comboUseCounts={"keys": ["a", "b"], "values": ["2", "5"]}),
            _rec(sessionId="s", timestamp=2, comboUseCounts={"keys": ["a"], "values": ["4"]}),
            _rec(sessionId="t", timestamp=1),
        ]
        out = compute_top_combos(records, "all")
        assert out == {"a": 6, "b": 5}
        assert list(out) == ["a", "b"]

    def test_non_numeric_counts_as_zero(self):
        records = [_rec(sessionId="s", comboUseCounts={"keys": ["a", "b"], "values": ["x", "1"]})]
        assert compute_top_combos(records, "all") == {"b": 1, "a": 0}

    def test_top_n(self):
        keys = [f"c{i}" for i in range(8)]
        values = [str(i) for i in range(8)]
        out = compute_top_combos([_rec(sessionId="s", comboUseCounts={"keys": keys, "values": values})], "all", top_n=3)
        assert list(out.values()) == [7, 6, 5]


class TestTopTrinkets:
    """Tests pour compute_top_trinkets."""

    def test_percent_of_filtered_sessions(self):
        records = [
            _rec(sessionId="s1", timestamp=1, playerClass="k", trinkets=["trinket_old"]),
            _rec(sessionId="s1", timestamp=2, playerClass="k", trinkets=["trinket_coin", "trinket_fang"]),
            _rec(sessionId="s2", timestamp=1, playerClass="k", trinkets=["trinket_coin"]),
            _rec(sessionId="s3", timestamp=1, playerClass="k", trinkets=[]),
            _rec(sessionId="s4", timestamp=1, playerClass="other", trinkets=["trinket_coin"]),
        ]
        out = compute_top_trinkets(records, "k")
        assert [(t.name, t.stat) for t in out] == [("coin", "67% owned"), ("fang", "33% owned")]
        assert out[0].key == "trinket_coin"
        assert all(0 <= t.value <= 100 for t in out)

    def test_duplicates_in_one_record_count_twice(self):
        records = [
            _rec(sessionId="s1", timestamp=1, trinkets=["trinket_coin", "trinket_coin"]),
            _rec(sessionId="s2", timestamp=1, trinkets=[]),
        ]
        out = compute_top_trinkets(records, "all")
        assert out[0].value == 100

    def test_name_keeps_underscores(self):
        out = compute_top_trinkets([_rec(sessionId="s", trinkets=["trinket_lucky_coin"])], "all")
        assert out[0].name == "lucky_coin"

    def test_empty_selection(self):
        assert compute_top_trinkets([], "all") == []


class TestTopCards:
    """Tests pour compute_top_cards."""

    def test_skips_non_numeric(self):
        records = [_rec(sessionId="s", cardUseCounts={"keys": ["card_a", "card_b"], "values": ["3", "x"]})]
        out = compute_top_cards(records, "all")
        assert [(c.key, c.value) for c in out] == [("card_a", 3)]

    def test_display_and_stat(self):
        records = [
            _rec(sessionId="s", timestamp=1, cardUseCounts={"keys": ["card_iron_wave"], "values": ["2"]}),
            _rec(sessionId="s", timestamp=2, cardUseCounts={"keys": ["card_iron_wave"], "values": ["5"]}),
        ]
        out = compute_top_cards(records, "all")
        assert out[0].name == "iron wave"
        assert out[0].stat == "7 uses"

    def test_missing_values_skips_record(self):
        records = [_rec(sessionId="s", cardUseCounts={"keys": ["card_a"]})]
        assert compute_top_cards(records, "all") == []

    def test_sorted_and_truncated(self):
        keys = [f"card_{i}" for i in range(10)]
        values = [str(i % 4) for i in range(10)]
        out = compute_top_cards([_rec(sessionId="s", cardUseCounts={"keys": keys, "values": values})], "all", top_n=4)
        assert len(out) == 4
        assert [c.value for c in out] == sorted((c.value for c in out), reverse=True)


class TestTopEnemies:
    """Tests pour compute_top_enemies."""

    def test_share_of_wins(self):
        """2 victoires contre enemy_x, 1 contre enemy_y -> 67% / 33%."""
        records = [
            _rec(sessionId="a", winnerIndex="2", enemyClass="enemy_x"),
            _rec(sessionId="b", winnerIndex="2", enemyClass="enemy_x"),
            _rec(sessionId="c", winnerIndex="2", enemyClass="enemy_y"),
            _rec(sessionId="d", winnerIndex="1", enemyClass="enemy_y"),
        ]
        out = compute_top_enemies(records, "all")
        assert [(e.name, e.win_rate) for e in out] == [("x", 67), ("y", 33)]
        assert sum(e.win_rate for e in out) == 100

    def test_display_name_normalized(self):
        records = [_rec(sessionId="a", winnerIndex="2", enemyClass="enemy_Bone_Knight")]
        assert compute_top_enemies(records, "all")[0].name == "bone knight"

    def test_no_wins(self):
        records = [_rec(sessionId="a", winnerIndex="1", enemyClass="enemy_x")]
        assert compute_top_enemies(records, "all") == []


class TestRankCounts:
    def test_stable_on_ties(self):
        assert rank_counts({"a": 1, "b": 2, "c": 1}, 5) == [("b", 2), ("a", 1), ("c", 1)]

    def test_non_positive_top_n(self):
        assert rank_counts({"a": 1}, 0) == []
