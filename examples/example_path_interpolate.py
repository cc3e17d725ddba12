"""Draw two partially styled paths and save them as an HTML figure.

Run: python examples/example_path_interpolate.py
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from pathtween import PathInterpolateRenderer, PlotlyPathBackend, StrokeParams, Arrow
from pathtween.utils.logging import configure_logging

configure_logging(level="DEBUG")

t = np.linspace(0, 2 * np.pi, 25)
observed = np.zeros(len(t), dtype=bool)
observed[[0, 12, 24]] = True

df = pd.concat(
    [
        pd.DataFrame({
            "group": "wave",
            "x": t,
            "y": np.sin(t),
            "observed": observed,
            "colour": np.where(observed, ["red"] * 25, None),
            "size": np.where(observed, [0.5] * 12 + [3.0] + [0.5] * 12, np.nan),
            "linetype": "solid",
        }),
        pd.DataFrame({
            "group": "ramp",
            "x": t,
            "y": t / 3 - 1,
            "observed": observed,
            "colour": np.where(observed, ["steelblue", None] * 12 + ["navy"], None),
            "size": np.where(observed, 1.0, np.nan),
            "linetype": "solid",
        }),
    ],
    ignore_index=True,
)

renderer = PathInterpolateRenderer(stroke=StrokeParams(cap_style="round", arrow=Arrow()))
primitive = renderer.draw_panel(df)
print(f"{type(primitive).__name__}: {len(primitive) if hasattr(primitive, '__len__') else ''}")

fig = go.Figure(PlotlyPathBackend().make_figure(primitive))
fig.write_html("path_interpolate.html")
print("wrote path_interpolate.html")
