"""Ports (interfaces) for the ports-and-adapters architecture."""

from seb_kiosk.domain.ports.inhibit_service import InhibitService

__all__ = ["InhibitService"]
