import html
import streamlit as st
import streamlit.components.v1 as components

from wander_client.api import BackendClient, BACKEND_URL
from wander_client.logger import configure_logging
from wander_client.models import NearbyPoint
from wander_client.session import SessionController

# Page configuration
st.set_page_config(
    page_title="Wander Mode",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better UI
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .coords-text {
        text-align: center;
        color: #888;
        font-family: monospace;
    }
    .place-card {
        padding: 0.75rem 1rem;
        border-radius: 0.5rem;
        border-left: 4px solid #43A047;
        background-color: #1f2a1f;
        margin: 0.5rem 0 0.25rem 0;
    }
    .place-name {
        font-weight: bold;
    }
    .place-meta, .place-address {
        color: #aaa;
        font-size: 0.85rem;
    }
    .success-box {
        padding: 1rem;
        background-color: #207a27;
        border-radius: 0.5rem;
        border-left: 4px solid #43A047;
        margin: 1rem 0;
    }
</style>
""", unsafe_allow_html=True)

configure_logging()

PLACE_TYPES = {"Cafés": "cafe", "Bars": "bar"}

# Initialize session state
if "controller" not in st.session_state:
    st.session_state.controller = SessionController(BackendClient())

if "city_input" not in st.session_state:
    st.session_state.city_input = ""

controller: SessionController = st.session_state.controller

def on_search():
    controller.search_city(st.session_state.city_input)

def on_teleport():
    controller.teleport()

def on_place_click(point: NearbyPoint):
    controller.select_nearby_point(point)

def display_place(index: int, point: NearbyPoint, disabled: bool):
    """Render one nearby place card with its teleport button."""
    lines = [f'<div class="place-card"><div class="place-name">{html.escape(point.name)}</div>']
    if point.categories:
        lines.append(f'<div class="place-meta">{html.escape(point.categories)}</div>')
    if point.distance is not None:
        lines.append(f'<div class="place-meta">~{round(point.distance)} m away</div>')
    if point.address:
        lines.append(f'<div class="place-address">{html.escape(point.address)}</div>')
    lines.append("</div>")
    st.markdown("".join(lines), unsafe_allow_html=True)
    st.button(
        "Teleport here",
        key=f"place_{index}_{point.id}",
        on_click=on_place_click,
        args=(point,),
        disabled=disabled,
        use_container_width=True,
    )

# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")

    if controller.api.health():
        st.markdown('<div class="success-box">✅ Backend Connected</div>', unsafe_allow_html=True)
    else:
        st.warning(f"⚠️ Backend not reachable at {BACKEND_URL}")
        st.code("cd backend && python run.py", language="bash")

    st.divider()

    label = st.radio("Nearby", list(PLACE_TYPES), index=0)
    controller.place_type = PLACE_TYPES[label]

state = controller.state

# Header
st.markdown('<div class="main-header">🧭 Wander Mode</div>', unsafe_allow_html=True)
st.markdown("<p style='text-align: center; color: #666;'>Explore random streets and discover nearby cafés.</p>", unsafe_allow_html=True)

search_col, search_btn_col, teleport_col = st.columns([4, 1, 1])
with search_col:
    st.text_input(
        "City",
        key="city_input",
        placeholder="Search city (London, Paris, Toronto...)",
        label_visibility="collapsed",
    )
with search_btn_col:
    st.button("Search", on_click=on_search, disabled=state.loading, use_container_width=True)
with teleport_col:
    st.button(
        "Loading..." if state.loading else "Teleport",
        on_click=on_teleport,
        disabled=state.loading,
        type="primary",
        use_container_width=True,
    )

if state.city_error:
    st.error(state.city_error)

if state.coordinate:
    st.markdown(
        f'<p class="coords-text">{state.coordinate.lat:.4f}, {state.coordinate.lng:.4f}</p>',
        unsafe_allow_html=True,
    )

# Street View
if state.panorama_error:
    st.error(f"Street View error: {state.panorama_error}")
elif state.panorama_url:
    components.iframe(state.panorama_url, height=480)
elif not state.loading:
    st.info("Use Teleport or Search to jump into a city and explore the street.")

# Nearby places
title = "Nearby bars" if controller.place_type == "bar" else "Nearby cafés"
st.subheader(f"{title} (Google Places)")

if state.nearby_error:
    st.error(state.nearby_error)
elif not state.nearby_points and not state.loading:
    st.caption("No places loaded yet. Teleport or search to see suggestions.")

columns = st.columns(3)
for i, point in enumerate(state.nearby_points):
    with columns[i % 3]:
        display_place(i, point, state.loading)
