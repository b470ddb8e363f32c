"""Interchangeable strategies for emitting messages."""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Decides where a message goes."""

    @abstractmethod
    def output(self, message):
        """Emit ``message``."""


class StreamOutput(OutputStrategy):
    """Writes each message as a line to a text stream (standard output by default)."""

    def __init__(self, stream=None):
        self.stream = stream

    def output(self, message):
        print(message, file=self.stream)