import pytest

from bangtable.markers import (
    HP_MARKER_HEIGHT,
    HP_MARKER_SPACING,
    NAME_TAG_HEIGHT,
    HPMarker,
    NameTag,
    PlayerFigure,
)


def make_figure(authority=True):
    return PlayerFigure(
        has_authority=authority, name_tag_class=NameTag, hp_marker_class=HPMarker
    )


def test_hp_marker_set_hidden_on_authority():
    marker = HPMarker()
    marker.set_hidden(True)
    assert marker.hidden is True
    assert marker.hidden_in_game is True


def test_hp_marker_ignores_without_authority():
    marker = HPMarker(has_authority=False)
    marker.set_hidden(True)
    assert marker.hidden is False
    assert marker.hidden_in_game is False


def test_hp_marker_replication_applies_flag():
    marker = HPMarker(has_authority=False, hidden=True)
    marker.on_rep_hidden_state()
    assert marker.hidden_in_game is True


def test_name_tag_set_text_renders():
    tag = NameTag()
    tag.set_display_text("Sheriff")
    assert tag.display_text == "Sheriff"
    assert tag.rendered_text == "Sheriff"
    assert tag.owner_no_see is True


def test_name_tag_ignores_without_authority():
    tag = NameTag(has_authority=False)
    tag.set_display_text("Outlaw")
    assert tag.display_text == ""
    assert tag.rendered_text == ""


def test_begin_play_spawns_name_tag_above_capsule():
    figure = make_figure()
    figure.begin_play()
    assert figure.name_tag is not None
    assert figure.name_tag.owner is figure
    assert figure.name_tag.location == (
        0.0,
        0.0,
        figure.capsule_half_height + NAME_TAG_HEIGHT,
    )


def test_begin_play_without_class_or_authority_spawns_nothing():
    plain = PlayerFigure()
    plain.begin_play()
    client = make_figure(authority=False)
    client.begin_play()
    assert plain.name_tag is None
    assert client.name_tag is None


def test_set_hp_spawns_visible_markers_in_centred_row():
    figure = make_figure()
    figure.set_hp(5)
    assert figure.hp == 5
    assert len(figure.hp_markers) == 5
    assert all(not m.hidden for m in figure.hp_markers)
    ys = [m.location[1] for m in figure.hp_markers]
    assert sum(ys) == pytest.approx(0.0)
    gaps = {round(b - a, 6) for a, b in zip(ys, ys[1:])}
    assert gaps == {HP_MARKER_SPACING}
    zs = {m.location[2] for m in figure.hp_markers}
    assert zs == {figure.capsule_half_height + HP_MARKER_HEIGHT}


def test_set_hp_single_marker_is_centred():
    figure = make_figure()
    figure.set_hp(1)
    assert figure.hp_markers[0].location[1] == 0.0


def test_set_hp_without_authority_does_nothing():
    figure = make_figure(authority=False)
    figure.set_hp(4)
    assert figure.hp_markers == []
    assert figure.hp == 5


def test_update_hp_hides_lost_points():
    figure = make_figure()
    figure.set_hp(4)
    figure.update_hp(2)
    assert [m.hidden for m in figure.hp_markers] == [False, False, True, True]
    figure.update_hp(4)
    assert all(not m.hidden for m in figure.hp_markers)


def test_update_hp_skips_destroyed_markers():
    figure = make_figure()
    figure.set_hp(3)
    figure.hp_markers[2].destroy()
    figure.update_hp(0)
    assert [m.hidden for m in figure.hp_markers] == [True, True, False]


def test_end_play_destroys_everything():
    figure = make_figure()
    figure.begin_play()
    figure.set_hp(3)
    tag = figure.name_tag
    markers = list(figure.hp_markers)
    figure.end_play()
    assert figure.name_tag is None
    assert figure.hp_markers == []
    assert tag.destroyed is True
    assert all(m.destroyed for m in markers)


def test_end_play_without_authority_keeps_attachments():
    figure = make_figure(authority=False)
    tag = NameTag(owner=figure)
    figure.name_tag = tag
    figure.end_play()
    assert figure.name_tag is tag
    assert tag.destroyed is False