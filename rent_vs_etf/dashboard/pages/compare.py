"""Comparison page: rental property vs ETF on the same starting capital."""

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import plotly.graph_objects as go
import httpx

from rent_vs_etf.config import settings

dash.register_page(__name__, path="/", name="Compare")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

# (request field, label, default, step)
PROPERTY_FIELDS = [
    ("comparison_period_years", "Investment Period (Years)", 10, 1),
    ("property_price", "Property Price ($)", 500000, 1000),
    ("down_payment_percentage", "Down Payment (%)", 20, 0.5),
    ("mortgage_interest_rate", "Mortgage Interest Rate (%)", 6.5, 0.25),
    ("mortgage_term_years", "Mortgage Term (Years)", 30, 1),
    ("monthly_rent", "Monthly Rent ($)", 2500, 50),
    ("annual_rent_increase_rate", "Annual Rent Increase (%)", 3, 0.5),
    ("annual_property_appreciation_rate", "Property Appreciation (%)", 4, 0.5),
    ("monthly_maintenance_cost", "Monthly Maintenance ($)", 200, 10),
    ("annual_property_tax_rate", "Property Tax Rate (%)", 1.2, 0.1),
    ("annual_insurance_cost", "Annual Insurance ($)", 1200, 50),
    ("vacancy_rate_percentage", "Vacancy Rate (%)", 5, 0.5),
    ("closing_costs", "Closing Costs ($)", 10000, 500),
    ("selling_costs_percentage", "Selling Costs (%)", 6, 0.5),
]

ETF_FIELDS = [
    ("etf_annual_return_rate", "Expected Annual Return (%)", 8, 0.5),
    ("etf_annual_fee_rate", "Annual Management Fee (%)", 0.5, 0.05),
]

ALL_FIELDS = PROPERTY_FIELDS + ETF_FIELDS
INT_FIELDS = {"comparison_period_years", "mortgage_term_years"}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(name, label, default, step):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        dcc.Input(id=f"cmp-{name}", type="number", value=default, step=step, style=FIELD_STYLE),
    ], style={"flex": "1", "minWidth": "180px"})


def _field_grid(fields):
    return html.Div(
        [_field(*field) for field in fields],
        style={"display": "flex", "flexWrap": "wrap", "gap": "1rem", "marginBottom": "1rem"},
    )


layout = html.Div([
    html.H2("Rental Property vs ETF"),
    html.P("Both strategies start with the same cash: down payment plus closing costs."),

    html.H3("Rental Property"),
    _field_grid(PROPERTY_FIELDS),

    html.H3("ETF"),
    _field_grid(ETF_FIELDS),

    html.Div([
        html.Button("Compare", id="compare-btn", n_clicks=0, style=BTN_STYLE),
        dcc.Checklist(
            id="save-to-history",
            options=[{"label": " Save to history", "value": "save"}],
            value=["save"],
            style={"marginLeft": "1rem"},
        ),
    ], style={"display": "flex", "alignItems": "center", "marginBottom": "2rem"}),

    dcc.Loading(html.Div(id="compare-results")),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def build_payload(values):
    """Map form values (in ALL_FIELDS order) to a request body; None if incomplete."""
    payload = {}
    for (name, _, _, _), value in zip(ALL_FIELDS, values):
        if value is None:
            return None
        payload[name] = int(value) if name in INT_FIELDS else value
    return payload


@callback(
    Output("compare-results", "children"),
    Input("compare-btn", "n_clicks"),
    [State("save-to-history", "value")] + [State(f"cmp-{name}", "value") for name, *_ in ALL_FIELDS],
    prevent_initial_call=True,
)
def run_comparison(n_clicks, save, *values):
    payload = build_payload(values)
    if payload is None:
        return html.Div("Fill in every field.", style={"color": "red"})

    try:
        resp = httpx.post(
            f"{settings.api_base_url}/api/v1/comparisons/preview", json=payload, timeout=30.0
        )
        resp.raise_for_status()
        data = resp.json()

        saved_id = None
        if save:
            saved = httpx.post(
                f"{settings.api_base_url}/api/v1/comparisons", json=payload, timeout=30.0
            )
            saved.raise_for_status()
            saved_id = saved.json()["id"]
    except httpx.HTTPStatusError as e:
        return html.Div(f"Error: {e.response.text}", style={"color": "red"})
    except httpx.HTTPError as e:
        return html.Div(f"Error: {e}", style={"color": "red"})

    return _build_results(data, saved_id)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _build_results(data, saved_id=None):
    rental = data["rental"]
    etf = data["etf"]
    winner = "Rental Property" if data["better_investment"] == "rental" else "ETF"

    banner = html.Div([
        html.H3(f"{winner} wins by ${float(data['profit_difference']):,.0f}", style={"margin": "0"}),
        html.Small(f"Saved as comparison #{saved_id}") if saved_id else None,
    ], style={
        "backgroundColor": "#e8f5e9" if data["better_investment"] == "rental" else "#e3f2fd",
        "padding": "1rem",
        "borderRadius": "8px",
        "marginBottom": "1.5rem",
    })

    summary = html.Div([
        html.Div([
            html.H4("Rental Property"),
            html.Div([
                _metric_card("Initial Investment", f"${float(rental['initial_investment']):,.0f}"),
                _metric_card("Total Cash Flow", f"${float(rental['total_cash_flow']):,.0f}"),
                _metric_card("Value at End", f"${float(rental['property_value_at_end']):,.0f}"),
                _metric_card("Total Profit", f"${float(rental['total_profit']):,.0f}"),
                _metric_card("Annualized Return", f"{float(rental['annualized_return']):.2f}%"),
            ], style={"display": "flex", "gap": "0.5rem", "flexWrap": "wrap"}),
        ], style={"flex": "1"}),
        html.Div([
            html.H4("ETF"),
            html.Div([
                _metric_card("Initial Investment", f"${float(etf['initial_investment']):,.0f}"),
                _metric_card("Final Value", f"${float(etf['final_value']):,.0f}"),
                _metric_card("Total Profit", f"${float(etf['total_profit']):,.0f}"),
                _metric_card("Annualized Return", f"{float(etf['annualized_return']):.2f}%"),
            ], style={"display": "flex", "gap": "0.5rem", "flexWrap": "wrap"}),
        ], style={"flex": "1"}),
    ], style={"display": "flex", "gap": "2rem", "marginBottom": "2rem"})

    projections = rental["yearly_projections"]
    years = [0] + [p["year"] for p in projections]
    rental_equity = [float(rental["initial_investment"])] + [float(p["equity"]) for p in projections]

    equity_fig = go.Figure()
    equity_fig.add_trace(go.Scatter(
        x=years, y=rental_equity,
        mode="lines+markers",
        name="Rental Equity (value - loan)",
        line=dict(color="#1a1a2e", width=3),
    ))
    equity_fig.add_trace(go.Scatter(
        x=years, y=[float(v) for v in etf["yearly_values"]],
        mode="lines+markers",
        name="ETF Value",
        line=dict(color="#e94560", width=3),
    ))
    equity_fig.update_layout(
        title="Equity Curve", xaxis_title="Year", yaxis_title="$", hovermode="x unified",
    )

    cf_fig = go.Figure()
    cf_fig.add_trace(go.Bar(
        x=years[1:],
        y=[float(p["cash_flow"]) for p in projections],
        name="Rental Cash Flow",
        marker_color="#1a1a2e",
    ))
    cf_fig.update_layout(title="Annual Rental Cash Flow", xaxis_title="Year", yaxis_title="$")

    table_header = html.Tr([
        html.Th("Year"), html.Th("Rent"), html.Th("Mortgage"), html.Th("Tax"),
        html.Th("Cash Flow"), html.Th("Value"), html.Th("Loan"), html.Th("Equity"),
    ])
    table_rows = [
        html.Tr([
            html.Td(p["year"]),
            html.Td(f"${float(p['rent_collected']):,.0f}"),
            html.Td(f"${float(p['mortgage_paid']):,.0f}"),
            html.Td(f"${float(p['property_tax']):,.0f}"),
            html.Td(f"${float(p['cash_flow']):,.0f}"),
            html.Td(f"${float(p['property_value']):,.0f}"),
            html.Td(f"${float(p['loan_balance']):,.0f}"),
            html.Td(f"${float(p['equity']):,.0f}"),
        ])
        for p in projections
    ]
    table = html.Table(
        [html.Thead(table_header), html.Tbody(table_rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )

    return html.Div([
        banner,
        summary,
        html.Div([
            dcc.Graph(figure=equity_fig, style={"width": "50%"}),
            dcc.Graph(figure=cf_fig, style={"width": "50%"}),
        ], style={"display": "flex", "gap": "1rem"}),
        html.H3("Year by Year", style={"marginTop": "2rem"}),
        table,
        html.P(
            f"Sale: selling costs ${float(rental['selling_costs']):,.0f}, "
            f"loan payoff ${float(rental['remaining_loan_balance']):,.0f}, "
            f"net proceeds ${float(rental['net_sale_proceeds']):,.0f}",
            style={"marginTop": "1rem"},
        ),
    ])


def _metric_card(label, value):
    return html.Div([
        html.Div(value, style={"fontSize": "1.25rem", "fontWeight": "bold"}),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ], style={
        "backgroundColor": "white",
        "border": "1px solid #ddd",
        "borderRadius": "8px",
        "padding": "0.75rem 1rem",
        "minWidth": "130px",
        "textAlign": "center",
    })
