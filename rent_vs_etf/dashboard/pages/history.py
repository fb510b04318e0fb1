"""History page: saved comparisons, newest first."""

import dash
from dash import html, dcc, callback, Input, Output
import httpx

from rent_vs_etf.config import settings

dash.register_page(__name__, path="/history", name="History")

layout = html.Div([
    html.H2("Comparison History"),
    html.Button("Refresh", id="history-refresh", n_clicks=0),
    dcc.Loading(html.Div(id="history-table", style={"marginTop": "1rem"})),
])


@callback(
    Output("history-table", "children"),
    Input("history-refresh", "n_clicks"),
)
def load_history(n_clicks):
    try:
        resp = httpx.get(
            f"{settings.api_base_url}/api/v1/comparisons", params={"limit": 100}, timeout=30.0
        )
        resp.raise_for_status()
        records = resp.json()
    except httpx.HTTPError as e:
        return html.Div(f"Error: {e}", style={"color": "red"})

    if not records:
        return html.P("No comparisons saved yet.")

    header = html.Tr([
        html.Th("#"), html.Th("Saved"), html.Th("Years"), html.Th("Price"),
        html.Th("Rental Profit"), html.Th("ETF Profit"), html.Th("Winner"), html.Th("Difference"),
    ])
    rows = [
        html.Tr([
            html.Td(r["id"]),
            html.Td(r["created_at"][:16].replace("T", " ")),
            html.Td(r["comparison_period_years"]),
            html.Td(f"${float(r['property_price']):,.0f}"),
            html.Td(f"${float(r['rental_total_profit']):,.0f}"),
            html.Td(f"${float(r['etf_total_profit']):,.0f}"),
            html.Td(r["better_investment"].upper()),
            html.Td(f"${float(r['profit_difference']):,.0f}"),
        ])
        for r in records
    ]
    return html.Table(
        [html.Thead(header), html.Tbody(rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )
