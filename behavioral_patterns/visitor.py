"""Items that visit characters, each character reacting in its own way."""

from .character import Character


class Visitor:
    """An object that interacts with characters; the base does nothing."""

    def visit_wizard(self, wizard):
        """Interact with a wizard."""

    def visit_elf(self, elf):
        """Interact with an elf."""

    def visit_monster(self, monster):
        """Interact with a monster."""


class Element(Character):
    """A character that can be visited and speaks its reaction."""

    def __init__(self):
        if type(self).accept is Element.accept:
            raise TypeError(f"{type(self).__name__} is abstract")
        super().__init__()
        self.said: list[str] = []

    def accept(self, visitor):
        """Let ``visitor`` interact with this character."""
        raise NotImplementedError

    def say(self, message):
        """Record a spoken line and return it."""
        self.said.append(message)
        return message


class Elf(Element):
    def accept(self, visitor):
        return visitor.visit_elf(self)


class Monster(Element):
    def accept(self, visitor):
        return visitor.visit_monster(self)


class Wizard(Element):
    def accept(self, visitor):
        return visitor.visit_wizard(self)


class MagicCrystal(Visitor):
    def visit_elf(self, elf):
        return elf.say("Использую для усиления способностей")

    def visit_monster(self, monster):
        return monster.say("Краду")

    def visit_wizard(self, wizard):
        return wizard.say("Активирую")


class Potion(Visitor):
    def visit_elf(self, elf):
        return elf.say("Собираю")

    def visit_monster(self, monster):
        return monster.say("Не знаю, что с этим делать")

    def visit_wizard(self, wizard):
        return wizard.say("Готовлю зелье")


class Trap(Visitor):
    def visit_elf(self, elf):
        return elf.say("Могу перепрыгнуть")

    def visit_monster(self, monster):
        return monster.say("Ломаю")

    def visit_wizard(self, wizard):
        return wizard.say("Попадаюсь")