"""Game rules, server protocol, chat log, input handling and text layout for a Codenames client."""

__version__ = "0.1.0"

__all__ = ["chatlog", "editor", "game", "network", "protocol", "render", "scenes"]