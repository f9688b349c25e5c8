from __future__ import annotations

import threading
import time

import pytest

from sortscope import fork_join


def test_returns_results_in_argument_order():
    def slow():
        time.sleep(0.05)
        return "left"

    assert fork_join(slow, lambda: "right") == ("left", "right")
    assert fork_join(lambda: 1, lambda: 2) == (1, 2)


def test_both_sides_run_concurrently():
    # each side waits for the other, so this only finishes if both run at once
    barrier = threading.Barrier(2, timeout=5)

    def side(tag):
        barrier.wait()
        return tag

    assert fork_join(lambda: side("a"), lambda: side("b")) == ("a", "b")


def test_right_side_runs_on_other_thread():
    caller = threading.get_ident()
    left, right = fork_join(threading.get_ident, threading.get_ident)
    assert left == caller
    assert right != caller


def test_left_failure_waits_for_right():
    done = []

    def right():
        time.sleep(0.05)
        done.append(True)
        return 1

    def left():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        fork_join(left, right)
    assert done == [True]


def test_right_failure_is_reraised():
    def right():
        raise KeyError("x")

    with pytest.raises(KeyError):
        fork_join(lambda: 1, right)
