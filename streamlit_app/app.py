"""
flightglobe Streamlit GUI Application
=====================================

Interactive viewer for the flight globe: scrub the animation clock,
switch what drives the sun and inspect the terminator.

Run with:
    streamlit run streamlit_app/app.py

Or:
    python -m streamlit run streamlit_app/app.py
"""

import sys
from datetime import datetime, time, timezone
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

try:
    import streamlit as st
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
except ImportError:
    print("Streamlit not installed. Install with: pip install streamlit")
    sys.exit(1)

from flightglobe.config import GlobeConfig
from flightglobe.core import build_context
from flightglobe.exceptions import ValidationError


def main():
    """Main Streamlit application."""
    st.set_page_config(
        page_title="flightglobe",
        page_icon="globe_with_meridians",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("flightglobe: Sun, Terminator and a Looping Flight")

    page = st.sidebar.selectbox(
        "Select View",
        [
            "Globe",
            "Subsolar Point",
            "Terminator",
        ]
    )

    if page == "Globe":
        show_globe()
    elif page == "Subsolar Point":
        show_subsolar_point()
    elif page == "Terminator":
        show_terminator()


def _flight_sidebar() -> GlobeConfig:
    """Collect the scene configuration from the sidebar."""
    config = GlobeConfig()
    flight = config.flight

    st.sidebar.subheader("Flight")
    flight.depart_name = st.sidebar.text_input("Departure", value=flight.depart_name)
    flight.depart_latitude = st.sidebar.number_input(
        "Departure latitude", -90.0, 90.0, flight.depart_latitude)
    flight.depart_longitude = st.sidebar.number_input(
        "Departure longitude", -180.0, 180.0, flight.depart_longitude)
    flight.arrive_name = st.sidebar.text_input("Arrival", value=flight.arrive_name)
    flight.arrive_latitude = st.sidebar.number_input(
        "Arrival latitude", -90.0, 90.0, flight.arrive_latitude)
    flight.arrive_longitude = st.sidebar.number_input(
        "Arrival longitude", -180.0, 180.0, flight.arrive_longitude)
    flight.time_scale_factor = st.sidebar.number_input(
        "Time scale (ms per clock unit)", min_value=1.0, value=flight.time_scale_factor)

    st.sidebar.subheader("Sun")
    config.solar.time_source = st.sidebar.radio(
        "Sun driven by", ["simulated", "wall", "fixed"], index=0)
    if config.solar.time_source == "fixed":
        config.solar.fixed_latitude = st.sidebar.slider(
            "Sun latitude", -23.44, 23.44, config.solar.fixed_latitude)
        config.solar.fixed_longitude = st.sidebar.slider(
            "Sun longitude", -180.0, 180.0, config.solar.fixed_longitude)

    st.sidebar.subheader("Rendering")
    config.render.resolution = st.sidebar.select_slider(
        "Resolution (px)", options=[128, 256, 384, 512], value=256)

    return config


def show_globe():
    """Globe snapshot page."""
    st.header("Globe")

    config = _flight_sidebar()
    try:
        context = build_context(config)
    except ValidationError as e:
        st.error(str(e))
        return

    period = context.tracker.loop_period
    clock = st.slider(
        "Animation clock",
        min_value=0.0,
        max_value=float(period),
        value=0.0,
        step=float(period) / 200.0,
    )

    frame = context.tick(clock)

    col1, col2 = st.columns([2, 1])

    with col1:
        from flightglobe.visualization import render_globe

        fig = render_globe(context, frame, config)
        st.pyplot(fig)
        plt.close(fig)

    with col2:
        st.subheader("Frame")
        st.metric("Progress", f"{frame.progress.ratio * 100:.1f}%")
        st.metric("Position", f"{frame.coordinate.latitude:+.2f}, "
                              f"{frame.coordinate.longitude:+.2f}")
        st.metric("Timezone", f"UTC{frame.timezone_label}")
        st.markdown(f"""
        **Local time:** {frame.local_time}

        **Simulated UTC:** {frame.progress.simulated_datetime.strftime('%Y-%m-%d %H:%M')}

        **Subsolar point:** {frame.sun.latitude:+.2f} deg, {frame.sun.longitude:+.2f} deg

        **Loop period:** {period:.1f} clock units
        """)


def show_subsolar_point():
    """Subsolar point for a chosen date and time."""
    st.header("Subsolar Point")

    from flightglobe.solar import sun_state

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Parameters")
        day = st.date_input("Date (UTC)", value=datetime(2025, 6, 21).date())
        clock_time = st.time_input("Time (UTC)", value=time(12, 0))

        instant = datetime.combine(day, clock_time, tzinfo=timezone.utc)
        state = sun_state(instant)

        st.metric("Latitude", f"{state.latitude:+.2f} deg")
        st.metric("Longitude", f"{state.longitude:+.2f} deg")

    with col2:
        st.subheader("Position on the map")

        fig, ax = plt.subplots(figsize=(10, 5))
        ax.scatter([state.longitude], [state.latitude], s=200, c='gold',
                   edgecolors='darkorange', zorder=3, label='Subsolar point')
        for lat, style in ((0.0, '-'), (23.44, '--'), (-23.44, '--'), (66.5, ':'), (-66.5, ':')):
            ax.axhline(lat, color='steelblue', linestyle=style, alpha=0.6)
        ax.set_xlim(-180, 180)
        ax.set_ylim(-90, 90)
        ax.set_xlabel("Longitude (deg)")
        ax.set_ylabel("Latitude (deg)")
        ax.grid(True, alpha=0.3)
        ax.legend()
        st.pyplot(fig)
        plt.close(fig)


def show_terminator():
    """Terminator blend factors page."""
    st.header("Terminator")

    from flightglobe.illumination import atmosphere_mix, atmosphere_tint, day_strength

    view_angle = st.slider("View angle from surface normal (deg)", 0.0, 90.0, 70.0)
    fresnel_term = 1.0 - abs(np.cos(np.radians(view_angle)))

    sun_angle = np.linspace(0.0, 180.0, 361)
    alignment = np.cos(np.radians(sun_angle))

    fig, axes = plt.subplots(2, 1, figsize=(10, 6), sharex=True,
                             gridspec_kw={'height_ratios': [3, 1]})
    axes[0].plot(sun_angle, day_strength(alignment), 'b-', linewidth=2, label='Day strength')
    axes[0].plot(sun_angle, atmosphere_mix(alignment, fresnel_term), 'r--', linewidth=2,
                 label='Atmosphere mix')
    axes[0].set_ylabel("Blend factor")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].imshow(atmosphere_tint(alignment)[None, :, :], aspect='auto', extent=(0, 180, 0, 1))
    axes[1].set_yticks([])
    axes[1].set_xlabel("Angle from subsolar point (deg)")

    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)


if __name__ == "__main__":
    main()
