from .repo_whatsapp_instancia import WhatsAppInstanciaRepository

__all__ = ["WhatsAppInstanciaRepository"]
