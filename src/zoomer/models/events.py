"""
Meeting websocket event codes.

Only the roster and chat indications are decoded; the rest are listed so
logs and the replay CLI can name what they skipped.
"""


class EventKind:
    WS_CONN_KEEPALIVE = 0

    WS_CONF_JOIN_REQ = 4097
    WS_CONF_JOIN_RES = 4098
    WS_CONF_RENAME_REQ = 4109
    WS_CONF_SET_CHAT_LEVEL_REQ = 4117
    WS_CONF_CHAT_REQ = 4135

    WS_CONF_ROSTER_INDICATION = 7937
    WS_CONF_ATTRIBUTE_INDICATION = 7938
    WS_CONF_HOST_CHANGE_INDICATION = 7939
    WS_CONF_COHOST_CHANGE_INDICATION = 7940
    WS_CONF_HOLD_CHANGE_INDICATION = 7941
    WS_CONF_CHAT_INDICATION = 7944

    WS_AUDIO_MUTE_REQ = 8193
    WS_VIDEO_MUTE_REQ = 12289
    WS_SHARING_STATUS_INDICATION = 16387

    @classmethod
    def name_of(cls, kind: int) -> str:
        for name, value in vars(cls).items():
            if name.startswith("WS_") and value == kind:
                return name
        return f"UNKNOWN({kind})"

    @classmethod
    def is_known(cls, kind: int) -> bool:
        return any(name.startswith("WS_") and value == kind for name, value in vars(cls).items())
