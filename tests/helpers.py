from flapcore.game.models import Bird, Frame, Ground, Pipe, PipePair


class FixedRandom:
    """Random source returning the same draw every time."""

    def __init__(self, top: float = 300.0, gap: int = 180, label_index: int = 0):
        self.top = top
        self.gap = gap
        self.label_index = label_index
        self.calls = []

    def uniform(self, a, b):
        self.calls.append(("uniform", a, b))
        return self.top

    def randint(self, a, b):
        self.calls.append(("randint", a, b))
        return self.gap

    def choice(self, seq):
        self.calls.append(("choice", len(seq)))
        return seq[self.label_index]


def make_pair(left, top_height=300.0, gap=180.0, show=True, width=50, height=800):
    return PipePair(
        top_pipe=Pipe(top=0, height=top_height, text="SQT"),
        bottom_pipe=Pipe(top=top_height + gap, height=height, text="SQT"),
        show=show,
        left=left,
        width=width,
    )


def make_frame(first, second, bird_top=380.0, bird_x=40, bird_size=40):
    return Frame(
        first_pipe=first,
        second_pipe=second,
        bird=Bird(top=bird_top, left=bird_x, size=bird_size),
        game_over=False,
        game_started=True,
        width=400,
        height=800,
        score=0,
        ground=Ground(height=20),
    )
