"""Adapters layer - GUI toolkit, desktop session and configuration integrations."""
