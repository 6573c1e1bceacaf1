from gcm_server.message import Message, MessageBuilder

__all__ = ["Message", "MessageBuilder"]
