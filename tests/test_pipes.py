import pytest

from flapcore.game.pipes import PipeFactory, PIPE_LABELS, GAP_MIN, GAP_MAX
from flapcore.game.random_source import SystemRandomSource

from helpers import FixedRandom


def make_factory(random_source):
    return PipeFactory(
        width=400,
        height=800,
        pipe_width=50,
        min_top=50,
        max_top=350,
        random_source=random_source,
    )


def test_generated_pairs_stay_in_bounds():
    factory = make_factory(SystemRandomSource(seed=1234))

    for _ in range(500):
        pair = factory.create(True)
        assert 50 <= pair.top_pipe.height <= 350
        assert pair.top_pipe.top == 0
        assert pair.bottom_pipe.height == 800
        gap = pair.bottom_pipe.top - pair.top_pipe.height
        assert gap == pytest.approx(round(gap))
        assert GAP_MIN <= round(gap) <= GAP_MAX


def test_pair_spawns_at_right_edge():
    pair = make_factory(FixedRandom()).create(True)

    assert pair.left == 350
    assert pair.width == 50
    assert pair.right == 400


@pytest.mark.parametrize("show", [True, False])
def test_show_flag_is_copied(show):
    assert make_factory(FixedRandom()).create(show).show is show


def test_both_pipes_share_label():
    pair = make_factory(FixedRandom(label_index=16)).create(True)

    assert pair.top_pipe.text == "♥Sally♥"
    assert pair.bottom_pipe.text == pair.top_pipe.text


def test_labels_drawn_from_fixed_list():
    factory = make_factory(SystemRandomSource(seed=99))
    labels = {factory.create(True).top_pipe.text for _ in range(300)}
    assert labels <= set(PIPE_LABELS)
    assert len(labels) > 1


def test_draw_ranges():
    source = FixedRandom(top=120.0, gap=160)
    pair = make_factory(source).create(False)

    assert ("uniform", 50, 350) in source.calls
    assert ("randint", 155, 180) in source.calls
    assert pair.top_pipe.height == 120.0
    assert pair.bottom_pipe.top == 280.0
    assert pair.gap == 160
