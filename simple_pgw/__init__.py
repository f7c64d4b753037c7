"""In-memory PDN gateway model: control plane, data plane and rate-limited bearers."""

__version__ = "0.1.0"
__all__ = ["bearer", "pdn_connection", "control_plane", "data_plane", "cli"]