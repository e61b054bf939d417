import html
import os

import streamlit as st

from weather_presenter.api_client import GatewayClient
from weather_presenter.geolocation import get_browser_geolocation
from weather_presenter.presenter import (
    ViewState,
    convert_temp,
    fetch_weather_by_city,
    fetch_weather_by_coords,
    location_title,
    start_location,
    timezone_label,
    toggle_unit,
    weather_details,
    weather_icon,
)

# Page configuration
st.set_page_config(
    page_title="Weather App",
    page_icon="🌤️",
    layout="centered",
)

# Custom CSS for the weather card
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1E88E5;
        font-weight: bold;
    }
    .weather-icon {
        font-size: 5rem;
        text-align: center;
    }
    .temperature {
        font-size: 3.5rem;
        font-weight: bold;
    }
    .description {
        font-size: 1.3rem;
        color: #888;
    }
    .timezone {
        color: #999;
    }
    .detail-item {
        padding: 0.75rem;
        border-radius: 0.5rem;
        background-color: rgba(30, 136, 229, 0.1);
        margin: 0.25rem 0;
    }
    .detail-item .label {
        font-weight: bold;
        margin-right: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
client = GatewayClient(BACKEND_URL)

# Initialize session state
if "view_state" not in st.session_state:
    st.session_state.view_state = ViewState()

if "location_checked" not in st.session_state:
    st.session_state.location_checked = False

def render_weather(state: ViewState):
    """Display the location header and the weather card."""
    weather = state.weather
    location = weather["location"]
    current = weather["current_weather"]

    st.subheader(f"📍 {location_title(location)}")
    timezone = timezone_label(location)
    if timezone:
        st.markdown(f'<p class="timezone">{html.escape(timezone)}</p>', unsafe_allow_html=True)

    icon_col, info_col = st.columns([1, 2])
    with icon_col:
        st.markdown(f'<div class="weather-icon">{weather_icon(current["weather_code"]).value}</div>', unsafe_allow_html=True)
    with info_col:
        temperature = convert_temp(current["temperature"], state.unit)
        st.markdown(f'<div class="temperature">{temperature}°{state.unit.value}</div>', unsafe_allow_html=True)
        st.markdown(f'<div class="description">{html.escape(current["description"])}</div>', unsafe_allow_html=True)

    # 2x2 details grid
    details = weather_details(current, state.unit)
    for row in (details[:2], details[2:]):
        cols = st.columns(2)
        for col, (label, value) in zip(cols, row):
            with col:
                st.markdown(
                    f'<div class="detail-item"><span class="label">{label}:</span><span class="value">{value}</span></div>',
                    unsafe_allow_html=True,
                )

# Header
header_col, toggle_col = st.columns([4, 1])
with header_col:
    st.markdown('<div class="main-header">🌤️ Weather App</div>', unsafe_allow_html=True)
with toggle_col:
    if st.button(f"°{st.session_state.view_state.unit.value}", help="Toggle between Fahrenheit and Celsius"):
        st.session_state.view_state = toggle_unit(st.session_state.view_state)
        st.rerun()

# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")
    if client.health():
        st.success("✅ Backend Connected")
    else:
        st.warning("⚠️ Backend Disconnected")
        st.code("cd backend && python run.py", language="bash")

# Device location, asked once per session
if not st.session_state.location_checked:
    position = get_browser_geolocation()
    if position is None:
        st.info("📡 Requesting your location...")
    else:
        st.session_state.location_checked = True
        state, latitude, longitude = start_location(st.session_state.view_state, position)
        with st.spinner("Loading weather data..."):
            st.session_state.view_state = fetch_weather_by_coords(state, client, latitude, longitude)

# City search
with st.form("weather_search", clear_on_submit=True):
    search_col, button_col = st.columns([4, 1])
    with search_col:
        search_term = st.text_input(
            "City", placeholder="Search for a city...", label_visibility="collapsed"
        )
    with button_col:
        submitted = st.form_submit_button("Search", use_container_width=True)

if submitted:
    with st.spinner("Loading weather data..."):
        st.session_state.view_state = fetch_weather_by_city(
            st.session_state.view_state, client, search_term
        )

view_state = st.session_state.view_state

if view_state.notice:
    st.info(view_state.notice)

if view_state.error:
    st.error(view_state.error)

if view_state.weather:
    render_weather(view_state)

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI & Open-Meteo | Made with ❤️ using Streamlit</small>
</div>
""", unsafe_allow_html=True)
