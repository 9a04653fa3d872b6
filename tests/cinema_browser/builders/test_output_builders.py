import plotly.graph_objs as go

from cinema_browser.builders import View, super_builder
from cinema_browser.builders.outputs import load_xy
from cinema_browser.builders.utils import ASSET_ROUTE
from cinema_browser.config.model import SpecDocument
from cinema_browser.core.database import Database


def _make_display(tmp_path, structures, records):
    def loader(source, callback):
        source.data = records
        callback()

    spec = SpecDocument.from_raw(
        {
            "cinema": {},
            "sources": {"s": {"uri": "r.csv", "mime": "text/csv"}},
            "displays": {"d": {"label": "D", "source": "s", "structures": structures}},
        }
    )
    db = Database(spec, str(tmp_path) + "/", loader=loader, builders=super_builder)
    display = db.displays["d"]
    display.activate()
    return display


def _view(structure):
    return [v for v in structure.content if isinstance(v, View)][0]


def test_image_builder_renders_one_image_per_record(tmp_path):
    records = [{"name": "a"}, {"name": "b"}]
    display = _make_display(
        tmp_path,
        {
            "img": {
                "type": "image-file-format-by-ext",
                "label": "Images",
                "io": "output",
                "arguments": {"uri_format": "images/%s.png", "0": "name"},
            }
        },
        records,
    )

    images = _view(display.outputs["img"]).value
    assert [i.src for i in images] == [
        f"{ASSET_ROUTE}/images/a.png",
        f"{ASSET_ROUTE}/images/b.png",
    ]


def test_output_table_follows_query(tmp_path):
    records = [{"x": 1}, {"x": 2}, {"x": 3}]
    display = _make_display(
        tmp_path,
        {
            "out": {"type": "table", "label": "T", "io": "output", "arguments": {}},
        },
        records,
    )
    out = display.outputs["out"]
    view = _view(out)

    assert view.value == records
    assert view.component.data == records
    assert [c["id"] for c in view.component.columns] == ["x"]

    out.query = records[1:]
    out.update()

    assert view.value == [{"x": 2}, {"x": 3}]


def test_simple_plot_2d_loads_one_dataset_per_record(tmp_path):
    (tmp_path / "plots").mkdir()
    (tmp_path / "plots" / "a.csv").write_text("t,v\n1,10\n2,20\n3,30\n")
    (tmp_path / "plots" / "b.csv").write_text("t,v\n1,5\n2,oops\n")
    records = [{"plot": "a"}, {"plot": "b"}]

    display = _make_display(
        tmp_path,
        {
            "plot": {
                "type": "simple-plot-2d",
                "label": "Plot",
                "io": "output",
                "arguments": {
                    "uri_format": "plots/%s.csv",
                    "0": "plot",
                    "xy": ["t", "v"],
                    "style": "scatter",
                    "scales": ["linear", "linear"],
                    "ranges": [None, [0, 50]],
                    "labels": ["Time", "Value"],
                    "units": ["s", "m"],
                },
            }
        },
        records,
    )

    fig = _view(display.outputs["plot"]).value
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 2
    assert list(fig.data[0].y) == [10, 20, 30]
    assert list(fig.data[1].x) == [1]
    assert fig.data[0].mode == "markers"
    assert list(fig.layout.xaxis.range) == [0, 3]
    assert list(fig.layout.yaxis.range) == [0, 50]
    assert fig.layout.xaxis.title.text == "Time (s)"


def test_load_xy_missing_file_is_empty(tmp_path):
    frame = load_xy(str(tmp_path / "nope.csv"), ["x", "y"])

    assert frame.empty
    assert list(frame.columns) == ["x", "y"]
