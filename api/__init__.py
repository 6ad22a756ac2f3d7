"""Capa de servicios HTTP que relaya payloads hacia los servidores remotos."""
