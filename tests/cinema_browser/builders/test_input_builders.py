import logging

from dash import dash_table, dcc

from cinema_browser.builders import Control, View, super_builder
from cinema_browser.config.model import SpecDocument
from cinema_browser.core.database import Database


def _make_records():
    records = []
    for t in (1.0, 0.5, 0.0):
        for field in ("pressure", "temperature"):
            for phi in (0, 45):
                records.append({"time": t, "field": field, "phi": phi, "theta": 0})
    return records


def _make_display(structures, records=None):
    records = _make_records() if records is None else records

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
    db = Database(spec, loader=loader, builders=super_builder)
    display = db.displays["d"]
    display.activate()
    return display


def _control(structure, index=0):
    return [c for c in structure.content if isinstance(c, Control)][index]


def _table_output():
    return {"type": "table", "label": "Out", "io": "output", "arguments": {}}


def test_scalar_builder_selects_smallest_value_first():
    display = _make_display(
        {
            "time": {"type": "scalar", "label": "Time", "io": "input", "arguments": {"value": "time", "units": "s"}},
            "out": _table_output(),
        }
    )
    time = display.inputs["time"]

    assert {r["time"] for r in time.query} == {0.0}
    assert len(time.query) == 4
    label = [v for v in time.content if isinstance(v, View)][0]
    assert label.value == "0.0 s"

    slider = _control(time)
    assert isinstance(slider.component, dcc.Slider)
    assert slider.component.max == 2


def test_scalar_builder_change_propagates_to_outputs():
    display = _make_display(
        {
            "time": {"type": "scalar", "label": "Time", "io": "input", "arguments": {"value": "time"}},
            "out": _table_output(),
        }
    )

    _control(display.inputs["time"]).on_change(2)

    out_rows = display.outputs["out"].query
    assert {r["time"] for r in out_rows} == {1.0}
    table_view = [v for v in display.outputs["out"].content if isinstance(v, View)][0]
    assert table_view.value == [dict(r) for r in out_rows]


def test_scalar_builder_range_limits_values():
    display = _make_display(
        {
            "time": {
                "type": "scalar",
                "label": "Time",
                "io": "input",
                "arguments": {"value": "time", "range": [0.5, 1.0]},
            },
        }
    )

    assert {r["time"] for r in display.inputs["time"].query} == {0.5}


def test_scalar_builder_on_output_is_invalid():
    display = _make_display(
        {"bad": {"type": "scalar", "label": "Bad", "io": "output", "arguments": {"value": "time"}}}
    )

    texts = [getattr(c, "children", None) for c in display.outputs["bad"].content]
    assert any("Could not create structure for type scalar" in str(t) for t in texts)


def test_category_builder_and_intersection_with_scalar():
    display = _make_display(
        {
            "time": {"type": "scalar", "label": "Time", "io": "input", "arguments": {"value": "time"}},
            "field": {"type": "category", "label": "Field", "io": "input", "arguments": {"value": "field"}},
            "out": _table_output(),
        }
    )
    field = display.inputs["field"]
    dropdown = _control(field)

    assert dropdown.component.value == "pressure"
    assert {r["field"] for r in field.query} == {"pressure"}

    dropdown.on_change("temperature")

    rows = display.outputs["out"].query
    assert len(rows) == 2
    assert all(r["field"] == "temperature" and r["time"] == 0.0 for r in rows)


def test_camera_orbit_builder_steps_phi():
    display = _make_display(
        {
            "cam": {"type": "camera-orbit", "label": "Cam", "io": "input", "arguments": {"phi_theta": ["phi", "theta"]}},
            "out": _table_output(),
        }
    )
    cam = display.inputs["cam"]
    assert {r["phi"] for r in cam.query} == {0}

    _control(cam, 0).on_change(5)  # clamped to the last phi

    assert {r["phi"] for r in display.outputs["out"].query} == {45}


def test_input_table_builder_starts_empty_and_tracks_selection():
    records = _make_records()
    display = _make_display(
        {
            "pick": {"type": "table", "label": "Pick", "io": "input", "arguments": {}},
            "out": _table_output(),
        },
        records=records,
    )
    pick = display.inputs["pick"]
    table = _control(pick)

    assert isinstance(table.component, dash_table.DataTable)
    assert pick.query == []
    assert display.outputs["out"].query == []

    table.on_change([3, 1])

    assert pick.query == [records[3], records[1]]
    assert display.outputs["out"].query == [records[1], records[3]]


def test_unknown_type_uses_invalid_builder(caplog):
    with caplog.at_level(logging.WARNING):
        display = _make_display({"x": {"type": "mystery", "label": "X", "io": "input", "arguments": {}}})

    contents = display.inputs["x"].content
    assert contents[0].children == "X"
    assert "mystery" in contents[1].children
