from gcm_server.message.builder import MessageBuilder
from gcm_server.message.models import Message
from gcm_server.message.serialization import to_json, to_payload

__all__ = ["Message", "MessageBuilder", "to_json", "to_payload"]
