"""Subjects that broadcast messages to subscribed observers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives messages from a subject."""

    @abstractmethod
    def update(self, message):
        ...


class Subject:
    """Keeps a list of unique observers and notifies them in subscription order."""

    def __init__(self):
        self.subscribers: list[Observer] = []

    def subscribe(self, observer):
        if observer not in self.subscribers:
            self.subscribers.append(observer)

    def unsubscribe(self, observer):
        self.subscribers = [s for s in self.subscribers if s is not observer]

    def notify(self, message):
        for subscriber in list(self.subscribers):
            subscriber.update(message)