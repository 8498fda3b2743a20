"""EV Performance Calculator Dashboard.

Interactive calculator built with Streamlit and Plotly.  Every input
change reruns the engine for the current vehicle; the page shows motor
sizing, energy and battery estimates, dynamic limits, the feasibility
assessment, the power curve and a comparison against the presets.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import plotly.graph_objects as go
import streamlit as st

from ev_engine.config import load_presets
from ev_engine.core.analysis import analyse_vehicle, vehicle_power_curve
from ev_engine.core.comparison import (
    WEIGHTED_METRICS,
    comparison_frame,
    radar_scores,
    weighted_radar_frame,
)
from ev_engine.core.constants import AuxiliaryLoad, TerrainType
from ev_engine.core.vehicle import VehicleSpec
from ev_engine.export import (
    default_export_name,
    export_csv,
    export_json,
    render_text_report,
)

_RATING_COLOURS: dict[str, str] = {
    "Excellent": "#15803d",
    "Good": "#65a30d",
    "Fair": "#ca8a04",
    "Poor": "#dc2626",
}

_RADAR_AXES: list[tuple[str, str]] = [
    ("Power", "power"),
    ("Efficiency", "efficiency"),
    ("Range", "range"),
    ("Performance", "performance"),
    ("Feasibility", "feasibility"),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_data
def _presets() -> dict[str, VehicleSpec]:
    return load_presets()


def _sidebar_spec(presets: dict[str, VehicleSpec]) -> VehicleSpec | None:
    """Collect a VehicleSpec from the sidebar, or None if it is invalid."""
    st.sidebar.header("Vehicle Parameters")

    preset_key: str = st.sidebar.selectbox(
        "Load preset",
        options=list(presets),
        format_func=lambda key: presets[key].name,
    )
    base = presets[preset_key]

    values = {
        "name": st.sidebar.text_input("Name", value=base.name),
        "mass": st.sidebar.number_input("Vehicle mass (kg)", value=base.mass),
        "additional_weight": st.sidebar.number_input(
            "Additional weight (kg)", value=base.additional_weight
        ),
        "top_speed": st.sidebar.number_input("Top speed (km/h)", value=base.top_speed),
        "acceleration_0_to_100": st.sidebar.number_input(
            "0-100 km/h (s)", value=base.acceleration_0_to_100, step=0.1
        ),
        "range_km": st.sidebar.number_input("Target range (km)", value=base.range_km),
        "tire_radius": st.sidebar.number_input(
            "Tire radius (m)", value=base.tire_radius, step=0.01
        ),
        "drag_coefficient": st.sidebar.number_input(
            "Drag coefficient", value=base.drag_coefficient, step=0.01
        ),
        "frontal_area": st.sidebar.number_input(
            "Frontal area (m²)", value=base.frontal_area, step=0.1
        ),
        "terrain_type": st.sidebar.selectbox(
            "Terrain",
            options=[t.value for t in TerrainType],
            index=[t for t in TerrainType].index(base.terrain_type),
        ),
        "auxiliary_load": st.sidebar.selectbox(
            "Auxiliary load",
            options=[a.value for a in AuxiliaryLoad],
            index=[a for a in AuxiliaryLoad].index(base.auxiliary_load),
        ),
    }

    try:
        return VehicleSpec.from_form(values)
    except ValueError as exc:
        st.sidebar.error(str(exc))
        return None


def _comparison_section(presets: dict[str, VehicleSpec], spec: VehicleSpec) -> None:
    """Bar, radar and weighted radar views of the current vehicle vs presets."""
    compared_keys: list[str] = st.multiselect(
        "Compare against presets",
        options=list(presets),
        default=list(presets)[:3],
        max_selections=3,
        format_func=lambda key: presets[key].name,
    )
    current = replace(spec, name=f"{spec.name} (current)")
    compared = [presets[key] for key in compared_keys] + [current]

    try:
        frame = comparison_frame(compared)
    except ValueError as exc:
        st.error(str(exc))
        return

    col_bar, col_radar = st.columns(2)

    with col_bar:
        fig_bar = go.Figure()
        for metric, label in (
            ("power", "Power (kW)"),
            ("battery", "Battery (kWh)"),
            ("consumption", "Consumption (Wh/km)"),
            ("feasibility", "Feasibility"),
        ):
            fig_bar.add_trace(go.Bar(x=frame.index, y=frame[metric], name=label))
        fig_bar.update_layout(barmode="group", height=400, title="Key figures")
        st.plotly_chart(fig_bar, use_container_width=True)

    with col_radar:
        fig_radar = go.Figure()
        for scores in radar_scores(compared):
            values = [getattr(scores, attr) for _, attr in _RADAR_AXES]
            fig_radar.add_trace(
                go.Scatterpolar(
                    r=values + values[:1],
                    theta=[label for label, _ in _RADAR_AXES] + [_RADAR_AXES[0][0]],
                    fill="toself",
                    name=scores.vehicle,
                )
            )
        fig_radar.update_layout(
            polar=dict(radialaxis=dict(range=[0, 100])),
            height=400,
            title="Radar scores",
        )
        st.plotly_chart(fig_radar, use_container_width=True)

    st.dataframe(frame)

    st.subheader("Performance priorities")
    col_weights, col_weighted = st.columns([1, 2])

    with col_weights:
        st.caption("1 = low priority, 3 = neutral, 5 = high priority")
        weights = {
            key: st.slider(label, min_value=1, max_value=5, value=3, key=f"w_{key}")
            for key, label, _ in WEIGHTED_METRICS
        }

    with col_weighted:
        weighted = weighted_radar_frame(compared, weights)
        axes = list(weighted.columns)
        fig_weighted = go.Figure()
        for name, row in weighted.iterrows():
            values = [int(v) for v in row]
            fig_weighted.add_trace(
                go.Scatterpolar(
                    r=values + values[:1],
                    theta=axes + axes[:1],
                    fill="toself",
                    name=name,
                )
            )
        fig_weighted.update_layout(
            polar=dict(radialaxis=dict(range=[0, 100])),
            height=420,
            title="Relative scores (0-100, higher is better)",
        )
        st.plotly_chart(fig_weighted, use_container_width=True)


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:  # noqa: C901
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="EV Performance Calculator", layout="wide")
    st.title("EV Performance Calculator")

    presets = _presets()
    spec = _sidebar_spec(presets)
    if spec is None:
        st.info("Fix the highlighted parameter in the sidebar to see results.")
        return

    result = analyse_vehicle(spec)
    power = result.motor_power
    energy = result.energy_consumption
    dynamics = result.vehicle_dynamics
    assessment = result.feasibility

    # ── Section 1: Headline results ──────────────────────────────────────
    st.header("1 -- Results")

    col_p, col_t, col_b, col_c = st.columns(4)
    col_p.metric("Required power", f"{power.required_power} kW")
    col_t.metric("Required torque", f"{power.required_torque} Nm")
    col_b.metric("Battery capacity", f"{energy.battery_capacity:.1f} kWh")
    col_c.metric("Consumption", f"{energy.consumption_wh_km} Wh/km")

    col_cp, col_ap, col_eff, col_ptw = st.columns(4)
    col_cp.metric("Cruise power", f"{power.cruise_power} kW")
    col_ap.metric("Acceleration power", f"{power.acceleration_power} kW")
    col_eff.metric("Drivetrain efficiency", f"{energy.total_efficiency} %")
    col_ptw.metric("Power-to-weight", f"{assessment.power_to_weight} W/kg")

    # ── Section 2: Feasibility ───────────────────────────────────────────
    st.header("2 -- Feasibility")

    colour = _RATING_COLOURS.get(assessment.rating, "#6b7280")
    st.markdown(
        f"**Score:** {assessment.score}/100 -- "
        f"<span style='color:{colour}'>**{assessment.rating}**</span>",
        unsafe_allow_html=True,
    )
    st.progress(assessment.score / 100)
    if assessment.issues:
        for issue in assessment.issues:
            st.warning(issue)
    else:
        st.success("No issues identified")

    # ── Section 3: Power curve & dynamics ────────────────────────────────
    st.header("3 -- Power Curve & Dynamics")

    col_curve, col_dyn = st.columns([2, 1])

    with col_curve:
        curve = vehicle_power_curve(spec).to_frame()
        fig_curve = go.Figure()
        fig_curve.add_trace(
            go.Scatter(
                x=curve["speed"],
                y=curve["power"],
                mode="lines+markers",
                name="Road-load power (kW)",
                line=dict(color="#2563eb"),
            )
        )
        fig_curve.add_trace(
            go.Scatter(
                x=curve["speed"],
                y=curve["force"],
                mode="lines",
                name="Tractive force (N)",
                yaxis="y2",
                line=dict(color="#f97316", dash="dot"),
            )
        )
        fig_curve.update_layout(
            title="Steady-state power vs speed",
            xaxis_title="Speed (km/h)",
            yaxis_title="Power (kW)",
            yaxis2=dict(title="Force (N)", overlaying="y", side="right"),
            height=400,
        )
        st.plotly_chart(fig_curve, use_container_width=True)

    with col_dyn:
        st.metric("Max theoretical speed", f"{dynamics.max_theoretical_speed} km/h")
        st.metric("Braking distance 100-0", f"{dynamics.braking_distance} m")
        st.metric("Cornering speed (50 m)", f"{dynamics.cornering_speed} km/h")
        st.metric("Mean 0-100 acceleration", f"{dynamics.acceleration_ms2} m/s²")

    # ── Section 4: Comparison ────────────────────────────────────────────
    st.header("4 -- Comparison")
    _comparison_section(presets, spec)

    # ── Section 5: Export ────────────────────────────────────────────────
    st.header("5 -- Export")

    now = datetime.now(timezone.utc)
    col_json, col_csv, col_txt = st.columns(3)
    col_json.download_button(
        "Export JSON",
        data=export_json(spec, result, timestamp=now),
        file_name=default_export_name("json", now),
        mime="application/json",
    )
    col_csv.download_button(
        "Export CSV",
        data=export_csv(spec, result),
        file_name=default_export_name("csv", now),
        mime="text/csv",
    )
    col_txt.download_button(
        "Download Report",
        data=render_text_report(spec, result, generated=now),
        file_name=default_export_name("txt", now),
        mime="text/plain",
    )

    # ── Footer ───────────────────────────────────────────────────────────
    st.markdown("---")
    st.caption(
        "Estimates use a four-phase WLTC approximation and fixed efficiency "
        "factors. Validate with detailed engineering analysis."
    )


if __name__ == "__main__":
    main()
