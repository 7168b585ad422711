"""Tempo weather preview — Streamlit page for the app view and its widget."""

from __future__ import annotations

import streamlit as st

from tempo import WeatherSession, get_settings, widget_provider_from_settings
from tempo._logging import configure_logging
from tempo.formatters import app_lines, widget_lines
from tempo.location import StaticLocationProvider
from tempo.models import Coordinate

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Tempo Weather",
    page_icon="⛅",
    layout="centered",
)

settings = get_settings()
configure_logging(settings.log_level)


# ── Sidebar — location override ─────────────────────────────────────────────

st.sidebar.title("Tempo")

use_fixed = st.sidebar.checkbox("Use fixed coordinate", value=settings.has_fixed_location)
provider = None
if use_fixed:
    lat = st.sidebar.number_input(
        "Latitude", min_value=-90.0, max_value=90.0,
        value=settings.latitude if settings.latitude is not None else 37.5665,
    )
    lon = st.sidebar.number_input(
        "Longitude", min_value=-180.0, max_value=180.0,
        value=settings.longitude if settings.longitude is not None else 126.978,
    )
    provider = StaticLocationProvider(Coordinate(lat=lat, lon=lon))

refresh = st.sidebar.button("Fetch weather")


# ── App view ─────────────────────────────────────────────────────────────────

st.subheader("App")

if refresh or "session_location" not in st.session_state:
    session = WeatherSession.from_settings(settings, provider=provider)
    try:
        with st.spinner("Fetching weather..."):
            session.start()
    finally:
        session.close()
    st.session_state["session_location"] = session.current_location
    st.session_state["session_weather"] = session.weather

for line in app_lines(
    st.session_state.get("session_location"),
    st.session_state.get("session_weather"),
):
    st.write(line)


# ── Widget preview ───────────────────────────────────────────────────────────

st.divider()
st.subheader("Widget")

timeline = widget_provider_from_settings(settings).timeline()
entry = timeline.entries[0]

with st.container(border=True):
    lines = widget_lines(entry)
    if entry.has_data:
        city, temperature, description = lines
        st.markdown(f"**{city}**")
        st.markdown(f"## {temperature}")
        st.caption(description)
    else:
        for line in lines:
            st.write(line)

if timeline.refresh_at is not None:
    st.caption(f"Next refresh: {timeline.refresh_at:%Y-%m-%d %H:%M:%S %Z}")
