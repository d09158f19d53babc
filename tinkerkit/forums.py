"""A forum that relays messages between anonymous users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Forum:
    anons: list[Anon] = field(default_factory=list)

    def add_user(self, anon: Anon) -> None:
        self.anons.append(anon)

    def broadcast(self, source: str, msg: str) -> None:
        """Deliver ``msg`` to every member whose id differs from ``source``."""
        for anon in self.anons:
            if anon.id != source:
                anon.receive_msg(msg)


@dataclass(eq=False)
class Anon:
    display: str
    id: str = "testuuid"
    forum: Optional[Forum] = None

    def join_forum(self, forum: Forum) -> None:
        """Register with ``forum``; the user's own ``forum`` link is left as it is."""
        forum.add_user(self)

    def send_message(self, msg: str) -> None:
        """Broadcast through the linked forum, if there is one."""
        if self.forum is not None:
            self.forum.broadcast(self.id, msg)

    def receive_msg(self, msg: str) -> None:
        print(f"Received {msg} from anon!")