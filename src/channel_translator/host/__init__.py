"""Host client abstraction and the HexChat adapter."""

from channel_translator.host.base import Eat, HostClient, HostContext
from channel_translator.host.hexchat import HexChatContext, HexChatHost

__all__ = ["Eat", "HexChatContext", "HexChatHost", "HostClient", "HostContext"]
