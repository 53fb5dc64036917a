"""Ingress gateway: WhatsApp webhook in, text reply out."""
