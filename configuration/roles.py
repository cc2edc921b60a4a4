from __future__ import annotations

import enum
from typing import Callable

RoleMaskProvider = Callable[[], "MultiplayerRole"]


class MultiplayerRole(enum.Flag):
    CLIENT = 1
    SERVER = 2
    CLIENT_AND_SERVER = CLIENT | SERVER

    @classmethod
    def parse(cls, raw: str) -> "MultiplayerRole":
        """
        Accepts member names ("CLIENT_AND_SERVER") as well as the display
        names used in configuration ("ClientAndServer", "Server", "Client").
        """
        normalized = raw.strip().replace("_", "").replace("-", "").lower()
        for member in (cls.CLIENT, cls.SERVER, cls.CLIENT_AND_SERVER):
            if member.name.replace("_", "").lower() == normalized:
                return member
        raise ValueError(f"unknown multiplayer role {raw!r}")

    @property
    def display_name(self) -> str:
        return "".join(part.capitalize() for part in (self.name or "").split("_"))


def fixed_role_mask(role: MultiplayerRole) -> RoleMaskProvider:
    def _provider() -> MultiplayerRole:
        return role

    return _provider


def role_mask_from_settings(settings) -> RoleMaskProvider:
    return fixed_role_mask(MultiplayerRole.parse(settings.default_role))
