"""
wacloud messaging components.

Usage:
    # Facade with every resource handler
    from wacloud.messaging.whatsapp import WhatsAppCloudAPI

    # Low-level transport
    from wacloud.messaging.whatsapp import WhatsAppClient, WhatsAppConfig
"""
