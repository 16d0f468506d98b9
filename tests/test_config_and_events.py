import numpy as np
import pytest

from tictactoe import EventBus, GameConfig, MoveAcceptedEvent

from helpers import O, X


def test_thinking_delay_range():
    config = GameConfig()
    rng = np.random.default_rng(1)
    delays = [config.thinking_delay(rng) for _ in range(200)]
    assert min(delays) >= 0.380
    assert max(delays) < 0.640


def test_delay_can_be_switched_off():
    config = GameConfig()
    config.AI_DELAY_MIN_MS = 0
    config.AI_DELAY_JITTER_MS = 0
    assert config.thinking_delay(np.random.default_rng()) == 0


def test_labels():
    config = GameConfig()
    assert config.label(X) == "X"
    assert config.label(O) == "O"
    assert config.label(None) == ""


def test_seeded_rng_is_reproducible():
    class Seeded(GameConfig):
        AI_SEED = 11

    assert Seeded().make_rng().random() == Seeded().make_rng().random()


def test_listeners_run_in_order_and_once():
    bus = EventBus()
    calls = []
    first = lambda e: calls.append(("first", e))
    second = lambda e: calls.append(("second", e))
    bus.subscribe(first)
    bus.subscribe(second)
    bus.subscribe(first)

    event = MoveAcceptedEvent(index=0, mark=O)
    bus.publish(event)

    assert calls == [("first", event), ("second", event)]


def test_listener_errors_propagate():
    bus = EventBus()

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(broken)
    with pytest.raises(RuntimeError):
        bus.publish(MoveAcceptedEvent(index=0, mark=X))
