import marimo

__generated_with = "0.19.9"
app = marimo.App(
    width="full",
    app_title="Flight Records Dashboard",
)


@app.cell
def _():
    import marimo as mo
    return (mo,)


@app.cell
def _(mo):
    mo.md(
        """
        # ✈️ Flight Records Dashboard

        A flight is **delayed** when its departure or arrival is more than
        **15 minutes** late.  Filter by airline, destination and date below.
        """
    )
    return


@app.cell
def _():
    """Generate synthetic flights and load them through the validating store."""
    import sys
    sys.path.insert(0, ".")

    from src.config.logging_config import configure_logging
    from src.config.settings import load_settings
    from src.generators.flight_generator import FlightDataGenerator
    from src.processing.statistics import compute_statistics
    from src.processing.store import FlightStore

    settings = load_settings()
    configure_logging(settings.log_level)

    gen = FlightDataGenerator(seed=settings.seed)
    store = FlightStore()
    results = store.load(gen.generate(settings.dashboard_sample_size))
    rejected = sum(1 for r in results if not r.accepted)

    print(f"✅ Loaded {len(store):,} flights ({rejected} rejected)")
    return compute_statistics, store


@app.cell
def _(mo, store):
    """Filter inputs."""
    dates = sorted({f.scheduled_departure.date() for f in store.all()})

    airline_filter = mo.ui.text(label="Airline contains")
    destination_filter = mo.ui.text(label="Destination contains")
    date_filter = mo.ui.dropdown(
        options={d.strftime("%m/%d/%Y"): d for d in dates},
        label="Scheduled date",
    )
    delayed_only = mo.ui.checkbox(label="Delayed only")

    mo.hstack(
        [airline_filter, destination_filter, date_filter, delayed_only],
        justify="start",
        gap=1.5,
    )
    return airline_filter, date_filter, delayed_only, destination_filter


@app.cell
def _(
    airline_filter,
    compute_statistics,
    date_filter,
    delayed_only,
    destination_filter,
    mo,
    store,
):
    """Compute statistics for the filtered set and render them."""
    import plotly.graph_objects as go

    flights = store.search(
        airline=airline_filter.value or None,
        destination=destination_filter.value or None,
        delayed=True if delayed_only.value else None,
        on=date_filter.value,
    )
    stats = compute_statistics(flights)

    def _card(title, value, subtitle="", color="#10b981"):
        return mo.md(f"""
<div style="
    background: linear-gradient(135deg, {color}22, {color}11);
    border: 1px solid {color}44;
    border-radius: 12px;
    padding: 20px 24px;
    text-align: center;
    min-width: 160px;
">
    <div style="font-size: 13px; color: #6b7280; font-weight: 500;">{title}</div>
    <div style="font-size: 32px; font-weight: 700; color: {color}; margin: 4px 0;">{value}</div>
    <div style="font-size: 12px; color: #9ca3af;">{subtitle}</div>
</div>
""")

    if stats is None:
        view = mo.md("**No flight data available for statistics.**")
    else:
        avg_delay = (
            f"{stats.average_delay_minutes:.1f} min"
            if stats.average_delay_minutes is not None
            else "n/a"
        )
        ontime_color = (
            "#10b981" if stats.on_time_percentage >= 80
            else "#f59e0b" if stats.on_time_percentage >= 60
            else "#ef4444"
        )
        kpi_cards = mo.hstack(
            [
                _card("Total Flights", f"{stats.total_flights:,}", "in filtered set"),
                _card("Delayed", f"{stats.delayed_count:,}", f"{stats.delayed_percentage:.1f}%", "#ef4444"),
                _card("On-time", f"{stats.on_time_count:,}", f"{stats.on_time_percentage:.1f}%", ontime_color),
                _card("Avg Delay", avg_delay, "delayed flights only", "#3b82f6"),
                _card(
                    "Passengers",
                    f"{stats.total_passengers:,}",
                    f"{stats.average_passengers_rounded} per flight",
                    "#8b5cf6",
                ),
            ],
            justify="center",
            gap=1,
        )

        # ── Top airlines / destinations ──────────────────────────────
        fig_airlines = go.Figure(go.Bar(
            x=[r.name for r in stats.top_airlines],
            y=[r.count for r in stats.top_airlines],
            text=[r.count for r in stats.top_airlines],
            textposition="outside",
            marker_color="#3b82f6",
        ))
        fig_airlines.update_layout(
            title="Top Airlines by Flight Count",
            plot_bgcolor="#fafafa",
            xaxis_tickangle=-35,
            height=400,
            margin=dict(t=50, b=80),
        )

        fig_destinations = go.Figure(go.Bar(
            x=[r.name for r in stats.top_destinations],
            y=[r.count for r in stats.top_destinations],
            text=[r.count for r in stats.top_destinations],
            textposition="outside",
            marker_color="#10b981",
        ))
        fig_destinations.update_layout(
            title="Top Destinations",
            plot_bgcolor="#fafafa",
            height=400,
            margin=dict(t=50, b=40),
        )

        # ── Status distribution ──────────────────────────────────────
        fig_status = go.Figure(go.Pie(
            labels=[s.status.value for s in stats.status_distribution],
            values=[s.count for s in stats.status_distribution],
            hole=0.4,
            sort=False,
        ))
        fig_status.update_layout(title="Flight Status Distribution", height=400, margin=dict(t=50, b=20))

        # ── Flight detail table ──────────────────────────────────────
        detail = [
            {
                "flight": f.flight_number,
                "airline": f.airline,
                "route": f"{f.origin}->{f.destination}",
                "departure": f.scheduled_departure.strftime("%m/%d %H:%M"),
                "status": f.status.value,
                "delay": f"{f.delay_minutes:.0f}min" if f.is_delayed else "On-time",
                "passengers": f.passenger_count,
                "aircraft": f.aircraft,
            }
            for f in sorted(flights, key=lambda f: f.scheduled_departure)
        ]

        view = mo.vstack([
            kpi_cards,
            mo.hstack([mo.as_html(fig_airlines), mo.as_html(fig_destinations)], widths=[0.5, 0.5]),
            mo.as_html(fig_status),
            mo.md("### Flight Detail"),
            mo.ui.table(detail),
        ])

    view
    return


if __name__ == "__main__":
    app.run()
