from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from . import keys
from .manager import ConfigurationManager


class StartupConfiguration(BaseModel):
    """
    Typed view of the recognized startup settings, read through the
    manager's permissive getters. Serializes with the on-disk key names:
      { "OverrideMultiplayerRole": false, "StartAsHost": false, ..., "Role": "ClientAndServer" }
    """

    model_config = ConfigDict(populate_by_name=True)

    override_multiplayer_role: bool = Field(False, alias=keys.OVERRIDE_MULTIPLAYER_ROLE)
    start_as_host: bool = Field(False, alias=keys.MODE_HOST)
    start_as_server: bool = Field(False, alias=keys.MODE_SERVER)
    start_as_client: bool = Field(False, alias=keys.MODE_CLIENT)
    max_players: int = Field(0, alias=keys.MAX_PLAYERS)
    port: int = Field(0, alias=keys.PORT)
    enable_bots: bool = Field(False, alias=keys.ENABLE_BOTS)
    server_ip: str = Field("", alias=keys.SERVER_IP)
    autoconnect: bool = Field(False, alias=keys.AUTOCONNECT)
    allow_reconnection: bool = Field(False, alias=keys.ALLOW_RECONNECTION)
    role: str = Field("", alias="Role")

    @classmethod
    def from_manager(cls, manager: ConfigurationManager) -> "StartupConfiguration":
        return cls(
            override_multiplayer_role=manager.get_bool(keys.OVERRIDE_MULTIPLAYER_ROLE),
            start_as_host=manager.get_bool(keys.MODE_HOST),
            start_as_server=manager.get_bool(keys.MODE_SERVER),
            start_as_client=manager.get_bool(keys.MODE_CLIENT),
            max_players=manager.get_int(keys.MAX_PLAYERS),
            port=manager.get_int(keys.PORT),
            enable_bots=manager.get_bool(keys.ENABLE_BOTS),
            server_ip=manager.get_string(keys.SERVER_IP),
            autoconnect=manager.get_bool(keys.AUTOCONNECT),
            allow_reconnection=manager.get_bool(keys.ALLOW_RECONNECTION),
            role=manager.get_multiplayer_role().display_name,
        )
