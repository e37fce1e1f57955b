from flapcore.core.state import GamePhase, PhaseMachine


def test_valid_transitions():
    machine = PhaseMachine()
    assert machine.phase == GamePhase.READY

    assert machine.transition(GamePhase.RUNNING)
    assert machine.transition(GamePhase.OVER)
    assert machine.phase == GamePhase.OVER


def test_invalid_transition_is_rejected():
    machine = PhaseMachine()

    assert not machine.transition(GamePhase.OVER)
    assert machine.phase == GamePhase.READY

    machine.transition(GamePhase.RUNNING)
    machine.transition(GamePhase.OVER)
    assert not machine.transition(GamePhase.RUNNING)


def test_reset_returns_to_ready():
    machine = PhaseMachine(GamePhase.OVER)
    machine.reset()
    assert machine.phase == GamePhase.READY


def test_listeners_notified():
    machine = PhaseMachine()
    seen = []
    machine.add_listener(lambda old, new: seen.append((old, new)))

    machine.transition(GamePhase.RUNNING)
    machine.reset()

    assert seen == [
        (GamePhase.READY, GamePhase.RUNNING),
        (GamePhase.RUNNING, GamePhase.READY),
    ]


def test_removed_listener_not_called():
    machine = PhaseMachine()
    seen = []

    def listener(old, new):
        seen.append(new)

    machine.add_listener(listener)
    machine.remove_listener(listener)
    machine.transition(GamePhase.RUNNING)
    assert seen == []


def test_failing_listener_is_isolated():
    machine = PhaseMachine()

    def broken(old, new):
        raise RuntimeError("listener failed")

    machine.add_listener(broken)
    assert machine.transition(GamePhase.RUNNING)
    assert machine.phase == GamePhase.RUNNING


def test_reset_from_ready_is_silent():
    machine = PhaseMachine()
    seen = []
    machine.add_listener(lambda old, new: seen.append((old, new)))

    machine.reset()
    assert seen == []
    assert machine.phase == GamePhase.READY
