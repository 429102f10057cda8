from players_api.base.base_accessor import BaseAccessor

__all__ = ("BaseAccessor",)
