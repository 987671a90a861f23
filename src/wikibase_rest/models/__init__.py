from .errors import ApiError, DisallowedBotEditError, DisallowedIpEditError, WikibaseError

__all__ = [
    "ApiError",
    "DisallowedBotEditError",
    "DisallowedIpEditError",
    "WikibaseError",
]
