"""Generate static HTML dashboard from one pipeline run."""
import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from plotly.utils import PlotlyJSONEncoder

from datadash.config import DOCS_DIR
from datadash.constants import DEFAULT_INTERVAL, INTERVALS
from datadash.data.insights import battle_index, risk_temperature, sentiment_floor
from datadash.data_manager import DataManager
from datadash.models import ArenaDashboardData
from datadash.utils import format_compact, format_currency, setup_logger
from datadash.visualization import create_dashboard_figures, leaderboard_frame

logger = setup_logger(__name__)


def generate_static_dashboard(interval: str = DEFAULT_INTERVAL, docs_dir: Path = DOCS_DIR) -> Path:
    """Generate docs/index.html and docs/data.json with the latest data."""
    logger.info("Loading data...")
    data = DataManager().load(interval)

    docs_dir.mkdir(parents=True, exist_ok=True)

    index_path = docs_dir / "index.html"
    with open(index_path, "w", encoding="utf-8") as f:
        f.write(generate_html(data))
    logger.info(f"Static dashboard generated at {index_path} (source={data.source})")

    # Also save the payload as JSON for potential future use
    with open(docs_dir / "data.json", "w", encoding="utf-8") as f:
        json.dump(data.to_dict(), f, indent=2)

    return index_path


def generate_html(data: ArenaDashboardData) -> str:
    """Generate HTML content with embedded charts."""
    figures = create_dashboard_figures(data)
    chart_divs = []
    chart_scripts = []
    for graph_id, fig in figures.items():
        chart_divs.append(f'<div class="chart-container"><div id="{graph_id}"></div></div>')
        fig_json = json.dumps(fig, cls=PlotlyJSONEncoder)
        chart_scripts.append(
            f"var fig = {fig_json}; Plotly.newPlot('{graph_id}', fig.data, fig.layout);"
        )

    table = leaderboard_frame(data.tokens)
    table["price"] = table["price"].map(format_currency)
    table["market_cap"] = table["market_cap"].map(format_currency)
    table["volume_24h"] = table["volume_24h"].map(format_compact)
    table_html = table.to_html(index=False, classes="leaderboard", border=0)

    badge = "LIVE" if data.source == "live" else "FALLBACK DATA"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Data Dash</title>
    <script src="https://cdn.plot.ly/plotly-latest.min.js"></script>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f8f9fa;
        }}
        .info {{
            background-color: #e8f4f8;
            padding: 15px;
            border-radius: 8px;
            margin-bottom: 20px;
        }}
        .chart-container, .data-table {{
            background-color: white;
            padding: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
            margin-bottom: 20px;
        }}
        table.leaderboard {{ width: 100%; border-collapse: collapse; font-size: 13px; }}
        table.leaderboard th, table.leaderboard td {{ padding: 6px 10px; border-bottom: 1px solid #dee2e6; }}
    </style>
</head>
<body>
    <h1>Data Dash</h1>
    <div class="info">
        <strong>{badge}</strong> · interval {data.interval} · last updated {data.last_updated}<br>
        Battle Index {battle_index(data.tokens)} · Risk {risk_temperature(data.tokens)} · Sentiment floor {sentiment_floor(data.tokens)}
    </div>
    <div class="data-table">{table_html}</div>
    {''.join(chart_divs)}
    <script>
    {' '.join(chart_scripts)}
    </script>
</body>
</html>
"""


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write a static Data Dash snapshot to docs/")
    parser.add_argument("--interval", choices=INTERVALS, default=DEFAULT_INTERVAL)
    args = parser.parse_args()
    generate_static_dashboard(args.interval)
