from __future__ import annotations

# Default name of the startup configuration file
DEV_CONFIG_FILE = "StartupConfiguration.json"

# Identifiers other subsystems read; renaming any of these is a breaking change.
OVERRIDE_MULTIPLAYER_ROLE = "OverrideMultiplayerRole"
MODE_HOST = "StartAsHost"
MODE_SERVER = "StartAsServer"
MODE_CLIENT = "StartAsClient"
MAX_PLAYERS = "MaxPlayers"
PORT = "Port"
ENABLE_BOTS = "EnableBots"
SERVER_IP = "ServerIP"
AUTOCONNECT = "AutoConnect"
ALLOW_RECONNECTION = "AllowReconnection"

RECOGNIZED_KEYS = (
    OVERRIDE_MULTIPLAYER_ROLE,
    MODE_HOST,
    MODE_SERVER,
    MODE_CLIENT,
    MAX_PLAYERS,
    PORT,
    ENABLE_BOTS,
    SERVER_IP,
    AUTOCONNECT,
    ALLOW_RECONNECTION,
)
