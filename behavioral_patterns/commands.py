"""Movement commands that can be executed and undone through an invoker."""

from abc import ABC, abstractmethod


class Receiver(ABC):
    """Recipient of movement commands."""

    @abstractmethod
    def move_forward(self):
        """Take a step forward."""

    @abstractmethod
    def move_back(self):
        """Take a step back."""

    @abstractmethod
    def move_left(self):
        """Take a step to the left."""

    @abstractmethod
    def move_right(self):
        """Take a step to the right."""


class Command:
    """A command bound to a receiver; the base does nothing."""

    def __init__(self, receiver):
        self.receiver = receiver

    def execute(self):
        """Carry out the command."""

    def undo(self):
        """Reverse the command."""


class MoveForwardCommand(Command):
    """Moves the receiver forward; undo moves it back."""

    def execute(self):
        self.receiver.move_forward()

    def undo(self):
        self.receiver.move_back()


class MoveBackCommand(Command):
    """Moves the receiver back; undo moves it forward."""

    def execute(self):
        self.receiver.move_back()

    def undo(self):
        self.receiver.move_forward()


class MoveLeftCommand(Command):
    """Moves the receiver left; undo moves it right."""

    def execute(self):
        self.receiver.move_left()

    def undo(self):
        self.receiver.move_right()


class MoveRightCommand(Command):
    """Moves the receiver right; undo moves it left."""

    def execute(self):
        self.receiver.move_right()

    def undo(self):
        self.receiver.move_left()


class Invoker:
    """Runs commands and keeps their history for undo."""

    def __init__(self):
        self.history: list[Command] = []

    def run_command(self, command):
        self.history.append(command)
        command.execute()

    def undo(self):
        """Undo the last command; return it, or None when the history is empty."""
        if not self.history:
            return None
        command = self.history.pop()
        command.undo()
        return command