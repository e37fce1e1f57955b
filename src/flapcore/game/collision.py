"""Axis-aligned collision tests between the bird and the pipe pairs."""

from flapcore.game.models import Bird, Frame, PipePair


def overlaps_bird(left: float, pipe_width: float, bird_x: float, bird_size: float) -> bool:
    """Check whether a pair at ``left`` overlaps the bird's horizontal footprint."""
    return left <= bird_x + bird_size and left + pipe_width >= bird_x


def clears_pair(pair: PipePair, bird: Bird, bird_size: float) -> bool:
    """Bird is strictly inside the opening between top and bottom pipe."""
    return (
        bird.top > pair.top_pipe.height
        and bird.top + bird_size < pair.bottom_pipe.top
    )


def has_collided_with_pipe(
    frame: Frame,
    pipe_width: float,
    bird_x: float,
    bird_size: float,
) -> bool:
    """Check the bird against the first overlapping visible pair.

    The first pair takes priority: when it overlaps, the second pair is
    never examined, even if it overlaps too.
    """
    for pair in frame.pipes:
        if pair.show and overlaps_bird(pair.left, pipe_width, bird_x, bird_size):
            return not clears_pair(pair, frame.bird, bird_size)
    return False
