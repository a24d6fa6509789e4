"""Tests pour le module src.app (état, présentation, orchestration)."""

from __future__ import annotations

import pytest

from src.app.dashboard import build_dashboard
from src.app.kpis import compute_kpi_stats
from src.app.presentation import (
    SLOT_CARD_PAIRS,
    SLOT_COMBOS,
    SLOT_FLOORS,
    SLOT_TRINKET_PAIRS,
    default_pinned_items,
    floor_histogram_series,
    mapping_series,
    pinned_chart_title,
    pinned_display_name,
)
from src.app.state import AppState
from src.config import DEFAULT_PLAYER_CLASS
from src.models import RankedItem, TelemetryRecord
from src.ui.components.stat_cards import stat_circle_html
from src.visualization.registry import ChartRegistry


def _rec(**kw) -> TelemetryRecord:
    return TelemetryRecord.from_dict(kw)


@pytest.fixture
def dataset() -> list[TelemetryRecord]:
    cards = {"keys": ["card_iron_wave", "card_bash"], "values": ["4", "2"]}
    return [
        _rec(
            sessionId="s1",
            timestamp=1,
            playerClass="kitsunagi",
            floor=3,
            comboUseCounts={"keys": ["slash_dash"], "values": ["3"]},
            cardUseCounts=cards,
            trinkets=["trinket_coin", "trinket_fang"],
            averageOutgoingDamage="12",
            winnerIndex="2",
            enemyClass="enemy_Bone_Knight",
        ),
        _rec(
            sessionId="s2",
            timestamp=1,
            playerClass="kitsunagi",
            floor=6,
            cardUseCounts=cards,
            trinkets=["trinket_coin"],
            averageOutgoingDamage="20",
            winnerIndex="1",
            enemyClass="enemy_x",
        ),
        _rec(sessionId="s3", timestamp=1, playerClass="ronin", floor=1),
    ]


class TestAppState:
    """Tests pour AppState."""

    def test_defaults(self):
        state = AppState()
        assert state.selected_class == DEFAULT_PLAYER_CLASS
        assert state.pinned_trinket is None

    def test_pin_card_normalizes(self):
        state = AppState()
        assert state.pin_card("  Iron Wave ")
        assert state.pinned_card == "card_iron_wave"

    def test_pin_trinket_normalizes(self):
        state = AppState()
        assert state.pin_trinket("Lucky Coin")
        assert state.pinned_trinket == "trinket_lucky_coin"

    def test_empty_input_is_ignored(self):
        state = AppState(pinned_card="card_bash")
        assert not state.pin_card("   ")
        assert state.pinned_card == "card_bash"

    def test_clear_pins(self):
        state = AppState(pinned_trinket="trinket_a", pinned_card="card_b")
        state.clear_pins()
        assert state.pinned_trinket is None
        assert state.pinned_card is None


class TestPresentation:
    """Tests des adaptateurs vers les séries de graphiques."""

    def test_floor_series_labels(self):
        series = floor_histogram_series([1, 0, 2, 0, 5])
        assert series.labels == ["1", "2", "3", "4", "5+"]
        assert series.values == [1, 0, 2, 0, 5]

    def test_mapping_series_keeps_order(self):
        series = mapping_series({"b": 3, "a": 1})
        assert series.labels == ["b", "a"]
        assert series.values == [3, 1]

    def test_titles(self):
        assert pinned_chart_title("lucky_coin", "trinket") == "best combos with trinket lucky_coin"
        assert pinned_chart_title("iron wave") == "best combos with iron wave"
        assert pinned_chart_title(None) == "best combos with —"

    def test_default_pins_use_raw_keys(self):
        trinkets = [RankedItem("trinket_coin", "coin", 50, "50% owned")]
        cards = [RankedItem("card_iron_wave", "iron wave", 4, "4 uses")]
        assert default_pinned_items(trinkets, cards) == ("trinket_coin", "card_iron_wave")
        assert default_pinned_items([], []) == (None, None)

    def test_pinned_display_name(self):
        assert pinned_display_name("trinket_lucky_coin") == "lucky_coin"
        assert pinned_display_name(None) is None

    def test_stat_circle_html_escapes(self):
        out = stat_circle_html(RankedItem("k", "<b>", 1, "1 uses"))
        assert "&lt;b&gt;" in out
        assert "1 uses" in out


class TestChartRegistry:
    """Tests pour ChartRegistry."""

    def test_redraw_replaces_figure(self):
        registry = ChartRegistry()
        registry.draw_bar_chart("slot", "A", "Uses", ["x", "y"], [1, 2])
        fig = registry.draw_bar_chart("slot", "B", "Uses", ["z"], [5])
        assert len(registry) == 1
        assert registry.get("slot") is fig
        assert len(fig.data) == 1
        assert list(fig.data[0].x) == ["z"]
        assert fig.layout.title.text == "B"

    def test_empty_series_has_no_trace(self):
        registry = ChartRegistry()
        fig = registry.draw_bar_chart("slot", "Vide", "Uses", [], [])
        assert len(fig.data) == 0
        assert fig.layout.title.text == "Vide"

    def test_slots_and_clear(self):
        registry = ChartRegistry()
        registry.draw_bar_chart("a", "A", "Uses", ["x"], [1])
        registry.draw_bar_chart("b", "B", "Uses", ["x"], [1])
        assert "a" in registry
        assert registry.slots() == ["a", "b"]
        registry.clear()
        assert "a" not in registry
        assert registry.slots() == []


class TestBuildDashboard:
    """Tests pour build_dashboard (sans Streamlit)."""

    def test_fills_four_slots(self, dataset):
        registry = ChartRegistry()
        view = build_dashboard(registry, dataset, AppState(selected_class="kitsunagi"))
        assert set(registry.slots()) == {SLOT_FLOORS, SLOT_COMBOS, SLOT_TRINKET_PAIRS, SLOT_CARD_PAIRS}
        assert list(registry.get(SLOT_FLOORS).data[0].y) == [0, 0, 1, 0, 1]
        assert registry.get(SLOT_COMBOS).layout.title.text == "Top Card Combos"
        assert view.pinned_trinket == "trinket_coin"
        assert view.pinned_card == "card_iron_wave"

    def test_default_pins_titles(self, dataset):
        registry = ChartRegistry()
        build_dashboard(registry, dataset, AppState(selected_class="kitsunagi"))
        assert registry.get(SLOT_TRINKET_PAIRS).layout.title.text == "best combos with trinket coin"
        assert registry.get(SLOT_CARD_PAIRS).layout.title.text == "best combos with card iron_wave"
        assert list(registry.get(SLOT_TRINKET_PAIRS).data[0].x) == ["fang"]
        assert list(registry.get(SLOT_CARD_PAIRS).data[0].x) == ["bash"]

    def test_user_pin(self, dataset):
        registry = ChartRegistry()
        state = AppState(selected_class="kitsunagi")
        state.pin_card("bash")
        view = build_dashboard(registry, dataset, state)
        assert view.pinned_card == "card_bash"
        assert registry.get(SLOT_CARD_PAIRS).layout.title.text == "best combos with bash"
        assert list(registry.get(SLOT_CARD_PAIRS).data[0].x) == ["iron wave"]

    def test_rebuild_does_not_accumulate(self, dataset):
        registry = ChartRegistry()
        build_dashboard(registry, dataset, AppState(selected_class="kitsunagi"))
        build_dashboard(registry, dataset, AppState(selected_class="ronin"))
        assert len(registry) == 4
        assert all(len(registry.get(s).data) <= 1 for s in registry.slots())
        assert list(registry.get(SLOT_FLOORS).data[0].y) == [1, 0, 0, 0, 0]

    def test_class_without_data(self, dataset):
        registry = ChartRegistry()
        view = build_dashboard(registry, dataset, AppState(selected_class="nobody"))
        assert view.trinkets == []
        assert view.pinned_card is None
        assert len(registry.get(SLOT_COMBOS).data) == 0


class TestKPIs:
    def test_compute_kpi_stats(self, dataset):
        kpis = compute_kpi_stats(dataset, "kitsunagi")
        assert kpis.records == 2
        assert kpis.sessions == 2
        assert kpis.wins == 1
        assert kpis.pick_rate == pytest.approx(66.7)

    def test_all_classes(self, dataset):
        kpis = compute_kpi_stats(dataset, "all")
        assert kpis.records == 3
        assert kpis.pick_rate is None
