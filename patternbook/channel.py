"""A video channel that notifies its subscribers of new uploads."""

from __future__ import annotations


class Channel:
    """A channel that subscribers can follow."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.subscribers: list[Subscriber] = []
        self.latest_video = ""

    def subscribe(self, subscriber: Subscriber) -> None:
        if subscriber not in self.subscribers:
            self.subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self.subscribers:
            self.subscribers.remove(subscriber)

    def notify_subscribers(self) -> list[str]:
        """Tell every subscriber about the latest video; return what each was told."""
        return [subscriber.update() for subscriber in list(self.subscribers)]

    def upload_video(self, title: str) -> list[str]:
        self.latest_video = title
        print(f'\n[{self.name} uploaded "{title}"]')
        return self.notify_subscribers()

    def video_data(self) -> str:
        return f"\nCheckout our new Video : {self.latest_video}\n"


class Subscriber:
    """Someone following a channel."""

    def __init__(self, name: str, channel: Channel) -> None:
        self.name = name
        self.channel = channel

    def update(self) -> str:
        text = f"Hey {self.name},{self.channel.video_data()}"
        print(text, end="")
        return text