# scripts/mock_database.py

import json
from pathlib import Path

import numpy as np
import pandas as pd


def main() -> None:
    # project root = parent of this file's directory
    root = Path(__file__).resolve().parent.parent
    data_dir = root / "data"
    (data_dir / "plots").mkdir(parents=True, exist_ok=True)

    rng = np.random.default_rng(42)

    # ---- one record per (time, phi, theta, field) ----
    times = [0.0, 0.5, 1.0, 1.5]
    angles = [-90, -45, 0, 45, 90]
    fields = ["pressure", "temperature"]

    rows = []
    for t in times:
        for phi in angles:
            for theta in angles:
                for f in fields:
                    plot = f"plots/{f}_{t}.csv"
                    rows.append(
                        {"time": t, "phi": phi, "theta": theta, "field": f, "plot": plot}
                    )
    pd.DataFrame(rows).to_csv(data_dir / "results.csv", index=False)

    # ---- a small xy series per (field, time) for the simple-plot-2d output ----
    x = np.linspace(0.1, 10.0, 50)
    for t in times:
        for f in fields:
            y = np.sin(x + t) + rng.normal(scale=0.1, size=x.size) + 2
            pd.DataFrame({"x": x, "y": y}).to_csv(data_dir / "plots" / f"{f}_{t}.csv", index=False)

    spec = {
        "cinema": {"name": "Mock Cinema Database", "type": "SpecD", "version": "2.0"},
        "sources": {
            "results": {"uri": "results.csv", "table": "results", "mime": "text/csv"},
        },
        "displays": {
            "main": {
                "label": "Results",
                "source": "results",
                "structures": {
                    "time": {
                        "type": "scalar",
                        "label": "Time",
                        "io": "input",
                        "arguments": {"value": "time", "units": "s"},
                    },
                    "field": {
                        "type": "category",
                        "label": "Field",
                        "io": "input",
                        "arguments": {"value": "field"},
                    },
                    "camera": {
                        "type": "camera-orbit",
                        "label": "Camera",
                        "io": "input",
                        "arguments": {"phi_theta": ["phi", "theta"]},
                    },
                    "table": {"type": "table", "label": "Selected", "io": "output", "arguments": {}},
                    "plot": {
                        "type": "simple-plot-2d",
                        "label": "Series",
                        "io": "output",
                        "arguments": {
                            "uri_format": "%s",
                            "0": "plot",
                            "xy": ["x", "y"],
                            "style": "line",
                            "scales": ["linear", "linear"],
                            "ranges": [None, None],
                            "labels": ["x", "y"],
                            "units": ["m", "Pa"],
                        },
                    },
                },
            }
        },
    }
    (data_dir / "cinema.json").write_text(json.dumps(spec, indent=2))
    print("wrote", data_dir / "cinema.json", len(rows), "records")


if __name__ == "__main__":
    main()
