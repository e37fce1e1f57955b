from flapcore.game.collision import overlaps_bird, clears_pair, has_collided_with_pipe

from helpers import make_frame, make_pair


def test_overlap_edges_are_inclusive():
    # Bird spans x 40..80
    assert overlaps_bird(80, 50, 40, 40)
    assert not overlaps_bird(80.5, 50, 40, 40)
    assert overlaps_bird(-10, 50, 40, 40)
    assert not overlaps_bird(-10.5, 50, 40, 40)
    assert overlaps_bird(40, 50, 40, 40)


def test_clearance_is_strict():
    pair = make_pair(left=40, top_height=300, gap=180)
    frame = make_frame(pair, make_pair(left=350, show=False))

    assert clears_pair(pair, frame.bird, 40)

    frame.bird.top = 300
    assert not clears_pair(pair, frame.bird, 40)

    frame.bird.top = 440  # bottom edge exactly on the bottom pipe
    assert not clears_pair(pair, frame.bird, 40)

    frame.bird.top = 439.5
    assert clears_pair(pair, frame.bird, 40)


def test_no_collision_without_overlap():
    frame = make_frame(
        make_pair(left=200, top_height=600),
        make_pair(left=300, top_height=600),
    )
    assert not has_collided_with_pipe(frame, 50, 40, 40)


def test_hidden_pair_is_ignored():
    frame = make_frame(
        make_pair(left=40, top_height=600, show=False),
        make_pair(left=350, show=False),
    )
    assert not has_collided_with_pipe(frame, 50, 40, 40)


def test_second_pair_checked_when_first_not_overlapping():
    frame = make_frame(
        make_pair(left=-60, show=True),
        make_pair(left=40, top_height=600),
    )
    assert has_collided_with_pipe(frame, 50, 40, 40)


def test_first_overlapping_pair_takes_priority():
    # First pair is cleared; second would collide but is never examined
    frame = make_frame(
        make_pair(left=-5, top_height=300),
        make_pair(left=60, top_height=600),
    )
    assert not has_collided_with_pipe(frame, 50, 40, 40)

    frame.first_pipe.show = False
    assert has_collided_with_pipe(frame, 50, 40, 40)
