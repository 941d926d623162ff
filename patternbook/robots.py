"""Robots assembled from interchangeable walk, talk and fly behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class WalkBehavior(ABC):
    @abstractmethod
    def walk(self) -> str:
        """Walk, returning a description."""


class NormalWalk(WalkBehavior):
    def walk(self):
        return _say("Walking normally...")


class NoWalk(WalkBehavior):
    def walk(self):
        return _say("Cannot walk.")


class TalkBehavior(ABC):
    @abstractmethod
    def talk(self) -> str:
        """Talk, returning a description."""


class NormalTalk(TalkBehavior):
    def talk(self):
        return _say("Talking normally...")


class NoTalk(TalkBehavior):
    def talk(self):
        return _say("Cannot talk.")


class FlyBehavior(ABC):
    @abstractmethod
    def fly(self) -> str:
        """Fly, returning a description."""


class NormalFly(FlyBehavior):
    def fly(self):
        return _say("Flying normally...")


class NoFly(FlyBehavior):
    def fly(self):
        return _say("Cannot fly.")


class Robot(ABC):
    """A robot that delegates its abilities to behaviour objects."""

    def __init__(
        self, walk_behavior: WalkBehavior, talk_behavior: TalkBehavior, fly_behavior: FlyBehavior
    ) -> None:
        self.walk_behavior = walk_behavior
        self.talk_behavior = talk_behavior
        self.fly_behavior = fly_behavior

    def walk(self) -> str:
        return self.walk_behavior.walk()

    def talk(self) -> str:
        return self.talk_behavior.talk()

    def fly(self) -> str:
        return self.fly_behavior.fly()

    @abstractmethod
    def projection(self) -> str:
        """Show what this kind of robot displays."""


class CompanionRobot(Robot):
    def projection(self):
        return _say("Displaying friendly companion features...")


class WorkerRobot(Robot):
    def projection(self):
        return _say("Displaying worker efficiency stats...")