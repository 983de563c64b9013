"""Tests for the animation driver lifecycle and tick dispatch."""

from unittest.mock import patch

from waveload.driver import AnimationDriver


def make_driver(duration_ms: int = 100):
    ticks: list[int] = []
    driver = AnimationDriver(ticks.append, duration_ms)
    return driver, ticks


# --- start() / pause() ---

def test_driver_starts_paused():
    driver, _ = make_driver()
    assert not driver.running
    assert not driver.closed


def test_start_and_pause_are_idempotent():
    driver, _ = make_driver()
    events = []
    driver.on_start(lambda d: events.append("start"))
    driver.on_pause(lambda d: events.append("pause"))

    driver.start()
    driver.start()
    driver.pause()
    driver.pause()

    assert events == ["start", "pause"]


def test_update_while_paused_fires_nothing():
    driver, ticks = make_driver()
    assert driver.update(1000) == 0
    assert ticks == []


# --- update() ---

def test_update_fires_one_tick_per_duration():
    driver, ticks = make_driver(100)
    driver.start()
    assert driver.update(250) == 2
    assert driver.update(50) == 1
    assert ticks == [1, 2, 3]


def test_pause_discards_scheduled_tick():
    driver, ticks = make_driver(100)
    driver.start()
    driver.update(90)
    driver.pause()
    driver.start()
    assert driver.update(20) == 0
    assert ticks == []


def test_tick_that_pauses_stops_the_batch():
    ticks = []

    def on_tick(n):
        ticks.append(n)
        driver.pause()

    driver = AnimationDriver(on_tick, 100)
    driver.start()
    assert driver.update(500) == 1
    assert ticks == [1]


def test_zero_duration_ticks_every_update():
    driver, ticks = make_driver(0)
    driver.start()
    driver.update(0)
    driver.update(0)
    assert ticks == [1, 2]


# --- set_duration() ---

def test_set_duration():
    driver, _ = make_driver()
    driver.set_duration(40)
    assert driver.duration_ms == 40


def test_negative_duration_is_ignored():
    driver, _ = make_driver(100)
    driver.set_duration(-10)
    assert driver.duration_ms == 100


# --- step() / run() ---

def test_step_ticks_even_when_paused():
    driver, ticks = make_driver()
    driver.step()
    assert ticks == [1]


def test_run_n_ticks():
    driver, ticks = make_driver()
    driver.run(4)
    assert ticks == [1, 2, 3, 4]
    assert driver.clock.tick_number == 4


def test_run_forever_until_paused():
    ticks = []

    def on_tick(n):
        ticks.append(n)
        if n == 3:
            driver.pause()

    driver = AnimationDriver(on_tick, 100)
    with patch("waveload.driver.time.sleep") as sleep:
        driver.run_forever()

    assert ticks == [1, 2, 3]
    assert not driver.running
    assert sleep.call_count == 2


# --- close() ---

def test_close_releases_tick_and_blocks_restart():
    driver, ticks = make_driver()
    driver.start()
    driver.close()

    assert driver.closed
    assert not driver.running
    driver.start()
    assert not driver.running
    driver.step()
    assert ticks == []


def test_close_twice_is_a_noop():
    driver, _ = make_driver()
    pauses = []
    driver.on_pause(lambda d: pauses.append(d))
    driver.start()
    driver.close()
    driver.close()
    assert len(pauses) == 1


def test_context_manager_closes():
    with AnimationDriver(lambda n: None) as driver:
        driver.start()
        assert driver.running
    assert driver.closed
    assert not driver.running
