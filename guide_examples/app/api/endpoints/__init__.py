"""Endpoint modules, each exposing an ``APIRouter`` named ``router``."""
