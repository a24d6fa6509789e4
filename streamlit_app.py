"""Run Telemetry - Dashboard Streamlit.

Application de visualisation des statistiques de runs (étages, combos,
trinkets, cartes, adversaires) depuis un export JSON de télémétrie.
"""

import logging

import streamlit as st

from src.analysis import compute_pick_rate, filter_by_class, format_pick_rate, list_player_classes
from src.app import (
    AppState,
    build_dashboard,
    init_source_state,
    load_dataset,
    render_all_kpis,
    render_dashboard,
)
from src.config import ALL_CLASSES, KNOWN_PLAYER_CLASSES, get_default_dataset_path
from src.data.loaders import records_to_frame
from src.ui import load_css, load_settings, resolve_character_image, save_settings
from src.visualization import ChartRegistry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def _on_class_change() -> None:
    # Changer de classe revient aux objets épinglés par défaut.
    state = AppState.from_session()
    state.clear_pins()
    state.save_pins_to_session()


def render_sidebar(state: AppState, class_options: list[str]) -> None:
    """Sélecteur de classe, source et paramètres."""
    settings = load_settings()

    st.sidebar.header("Classe")
    if state.selected_class not in class_options:
        class_options = class_options + [state.selected_class]
    st.sidebar.selectbox(
        "Classe",
        options=class_options,
        key="selected_class",
        on_change=_on_class_change,
        label_visibility="collapsed",
    )

    with st.sidebar.expander("Source", expanded=False):
        path = st.text_input("Dataset (JSON)", value=state.dataset_path)
        top_n = st.number_input("Top N", min_value=1, max_value=20, value=int(settings.top_n), step=1)
        if st.button("Enregistrer", width="stretch"):
            settings.dataset_path = str(path or "").strip()
            settings.top_n = int(top_n)
            ok, msg = save_settings(settings)
            if ok:
                st.session_state["dataset_path"] = settings.dataset_path or get_default_dataset_path()
                st.rerun()
            else:
                logger.error(msg)
                st.error(msg)


def main() -> None:
    st.set_page_config(page_title="Run Telemetry", layout="wide")
    st.markdown(load_css(), unsafe_allow_html=True)

    settings = load_settings()
    init_source_state(get_default_dataset_path(), settings)

    state = AppState.from_session()
    records = load_dataset(state.dataset_path)

    class_options = [ALL_CLASSES] + list_player_classes(records, KNOWN_PLAYER_CLASSES)
    render_sidebar(state, class_options)
    state = AppState.from_session()

    header_l, header_r = st.columns([4, 1])
    with header_l:
        st.title(f"class: {state.selected_class}")
        st.caption(format_pick_rate(compute_pick_rate(records, state.selected_class)))
    with header_r:
        image = resolve_character_image(state.selected_class)
        if image:
            st.image(image, width=120)

    if not records:
        st.info(
            "Aucune donnée chargée. Vérifie le chemin du dataset "
            f"({state.dataset_path or '—'}) dans la barre latérale."
        )
        return

    render_all_kpis(records, state.selected_class)

    registry = ChartRegistry()
    view = build_dashboard(registry, records, state, top_n=int(settings.top_n))
    render_dashboard(registry, view, state)

    with st.expander("Enregistrements", expanded=False):
        st.dataframe(
            records_to_frame(filter_by_class(records, state.selected_class)),
            width="stretch",
            hide_index=True,
        )


if __name__ == "__main__":
    main()
