"""
Mediator pattern: a chat room routing messages between members.

Members only know the room. They never hold references to each other, so
every delivery goes through ChatRoom and is recorded as sent via mediator.
"""

from typing import Any, Dict, List, Optional, Tuple

from catalog.effects import EffectLog
from catalog.errors import InvalidInput, NotFound
from catalog.patterns.base import PatternDemo


class ChatRoom:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects
        self._members: Dict[str, "ChatMember"] = {}

    def join(self, member: "ChatMember") -> None:
        if member.name in self._members:
            raise InvalidInput(f"{member.name} is already in the room")
        self._members[member.name] = member
        member.room = self

    def leave(self, name: str) -> None:
        member = self._members.pop(name, None)
        if member is None:
            raise NotFound(f"no member named {name!r}")
        member.room = None

    @property
    def members(self) -> List[str]:
        return list(self._members)

    def send(self, sender: str, text: str, to: Optional[str] = None) -> int:
        """Route a message; ``to=None`` broadcasts to everyone but the sender.

        Returns:
            Number of members the message was delivered to

        Raises:
            NotFound: If the sender or the recipient is not in the room
        """
        if sender not in self._members:
            raise NotFound(f"no member named {sender!r}")
        if to is not None and to not in self._members:
            raise NotFound(f"no member named {to!r}")

        recipients = [to] if to is not None else [n for n in self._members if n != sender]
        for name in recipients:
            self._effects.emit(f"{sender} -> {name}: {text} (sent via mediator)")
            self._members[name].receive(sender, text)
        return len(recipients)


class ChatMember:
    def __init__(self, name: str) -> None:
        self.name = name
        self.room: Optional[ChatRoom] = None
        self.inbox: List[Tuple[str, str]] = []

    def send(self, text: str, to: Optional[str] = None) -> int:
        if self.room is None:
            raise InvalidInput(f"{self.name} has not joined a room")
        return self.room.send(self.name, text, to)

    def receive(self, sender: str, text: str) -> None:
        self.inbox.append((sender, text))


class MediatorDemo(PatternDemo):
    name = "mediator"
    summary = "Chat members talk only through the room, never to each other directly"
    default_inputs = {
        "members": ["alice", "bob", "carol"],
        "messages": [
            ["alice", "bob", "lunch?"],
            ["bob", None, "anyone up for lunch?"],
        ],
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        room = ChatRoom(effects)
        members = {name: ChatMember(str(name)) for name in inputs["members"]}
        for member in members.values():
            room.join(member)

        for message in inputs["messages"]:
            if len(message) != 3:
                raise InvalidInput(f"expected [sender, recipient, text], got {message!r}")
            sender, recipient, text = message
            if sender not in members:
                raise NotFound(f"no member named {sender!r}")
            members[sender].send(str(text), recipient)

        for member in members.values():
            effects.emit(f"{member.name} inbox: {len(member.inbox)}")
