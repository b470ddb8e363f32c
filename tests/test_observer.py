import pytest

from behavioral_patterns.observer import Observer, Subject


class Recorder(Observer):
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def update(self, message):
        self.log.append((self.name, message))


def test_notify_reaches_all_in_order():
    log = []
    subject = Subject()
    a, b = Recorder(log, "a"), Recorder(log, "b")
    subject.subscribe(a)
    subject.subscribe(b)
    assert subject.subscribers == [a, b]
    subject.notify("hello")
    assert log == [("a", "hello"), ("b", "hello")]


def test_subscribe_is_unique():
    log = []
    subject = Subject()
    a = Recorder(log, "a")
    subject.subscribe(a)
    subject.subscribe(a)
    assert subject.subscribers == [a]
    subject.notify("x")
    assert log == [("a", "x")]


def test_unsubscribe_stops_messages():
    log = []
    subject = Subject()
    a, b = Recorder(log, "a"), Recorder(log, "b")
    subject.subscribe(a)
    subject.subscribe(b)
    subject.unsubscribe(a)
    assert subject.subscribers == [b]
    subject.notify("m")
    assert log == [("b", "m")]


def test_unsubscribe_unknown_is_harmless():
    log = []
    subject = Subject()
    subject.unsubscribe(Recorder(log, "a"))
    assert subject.subscribers == []


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()