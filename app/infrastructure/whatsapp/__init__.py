from .gateway import ChatGateway
from .bridge_client import WhatsAppBridgeClient

__all__ = ["ChatGateway", "WhatsAppBridgeClient"]
