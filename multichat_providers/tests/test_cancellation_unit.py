"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cascade to children, late link of child after
parent cancel, raise_if_cancelled and abort callbacks.
"""
from __future__ import annotations

import threading

import pytest

from multichat_providers.base.cancellation import (
    CancellationToken,
    CancelledError,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()


def test_callbacks_run_once_and_failures_do_not_block_others():
    token = CancellationToken()
    calls = []

    def boom():
        raise RuntimeError("close failed")

    token.add_callback(boom)
    token.add_callback(lambda: calls.append("second"))
    token.cancel()
    token.cancel()
    assert calls == ["second"]  # nosec B101 - pytest assert in tests


def test_callback_registered_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel()
    calls = []
    token.add_callback(lambda: calls.append(1))
    assert calls == [1]  # nosec B101 - pytest assert in tests


def test_removed_callback_does_not_fire():
    token = CancellationToken()
    calls = []
    remove = token.add_callback(lambda: calls.append(1))
    remove()
    remove()
    token.cancel()
    assert calls == []  # nosec B101 - pytest assert in tests


def test_cancel_from_another_thread():
    token = CancellationToken()
    fired = threading.Event()
    token.add_callback(fired.set)
    t = threading.Thread(target=token.cancel, args=("ui",))
    t.start()
    t.join()
    assert fired.is_set() and token.reason == "ui"  # nosec B101 - pytest assert in tests
