import pytest

from printflow.domain.panel_layout import LEFT_COLUMN, RIGHT_COLUMN, PanelLayoutEngine


def test_panels_alternate_columns_and_stack():
    engine = PanelLayoutEngine()

    placements = [engine.place_panel(i, key=name) for i, name in enumerate(["HP", "Canon", "Epson", "Brother"])]

    assert [p.column for p in placements] == [LEFT_COLUMN, RIGHT_COLUMN, LEFT_COLUMN, RIGHT_COLUMN]
    assert [p.row for p in placements] == [0, 0, 1, 1]
    assert [p.anchor_below for p in placements] == [None, None, "HP", "Canon"]


def test_left_and_right_geometry():
    engine = PanelLayoutEngine()
    left = engine.place_panel(0)
    right = engine.place_panel(1)

    assert left.is_left
    assert (left.x_percent, left.x_margin, left.width_percent) == (0, 1, 49)
    assert not right.is_left
    assert (right.x_percent, right.width_percent, right.fill_margin) == (51, None, 1)


def test_replacing_same_order_returns_recorded_placement():
    engine = PanelLayoutEngine()
    first = engine.place_panel(0, key="HP")

    assert engine.place_panel(0, key="ignored") is first
    assert len(engine.placements()) == 1


def test_out_of_order_placement_is_rejected():
    engine = PanelLayoutEngine()

    with pytest.raises(ValueError):
        engine.place_panel(1)
    with pytest.raises(ValueError):
        engine.place_panel(-1)


def test_unbounded_panels_keep_two_columns():
    engine = PanelLayoutEngine()
    for i in range(25):
        engine.place_panel(i, key=f"P{i}")

    assert len(engine.column_keys(LEFT_COLUMN)) == 13
    assert len(engine.column_keys(RIGHT_COLUMN)) == 12
    assert engine.placements()[-1].anchor_below == "P22"


def test_engines_do_not_share_layout_state():
    a = PanelLayoutEngine()
    b = PanelLayoutEngine()
    a.place_panel(0, key="HP")
    a.place_panel(1, key="Canon")
    a.place_panel(2, key="Epson")

    first_in_b = b.place_panel(0, key="Zebra")

    assert first_in_b.anchor_below is None
    assert first_in_b.row == 0


def test_reset_clears_memo():
    engine = PanelLayoutEngine()
    engine.place_panel(0, key="HP")
    engine.reset()

    again = engine.place_panel(0, key="Canon")

    assert again.key == "Canon"
    assert again.anchor_below is None
