import pytest

from gitdemo.signals import RefreshNotifier


def test_emit_calls_each_subscriber() -> None:
    notifier = RefreshNotifier()
    calls: list[str] = []
    notifier.subscribe(lambda: calls.append("a"))
    notifier.subscribe(lambda: calls.append("b"))

    notifier.emit()

    assert calls == ["a", "b"]


def test_unsubscribe_stops_delivery() -> None:
    notifier = RefreshNotifier()
    calls: list[str] = []
    unsubscribe = notifier.subscribe(lambda: calls.append("a"))

    unsubscribe()
    unsubscribe()
    notifier.emit()

    assert calls == []


def test_handler_error_propagates() -> None:
    notifier = RefreshNotifier()

    def broken() -> None:
        raise RuntimeError("tree gone")

    notifier.subscribe(broken)
    with pytest.raises(RuntimeError, match="tree gone"):
        notifier.emit()
