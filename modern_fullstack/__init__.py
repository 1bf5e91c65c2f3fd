"""create-modern-fullstack -- bootstrap fullstack apps from bundled templates."""

__version__ = "0.1.0"
