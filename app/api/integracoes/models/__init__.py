from .model_whatsapp_instancia import WhatsAppInstanciaModel

__all__ = ["WhatsAppInstanciaModel"]
