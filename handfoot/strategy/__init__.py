"""Strategy module for handfoot."""

from handfoot.strategy.base import CallbackStrategy, DrawChoice, Strategy

__all__ = ["CallbackStrategy", "DrawChoice", "Strategy"]
