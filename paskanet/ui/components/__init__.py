"""Reusable widgets: accent button, metric cards, the server log view."""

from paskanet.ui.components.buttons import PrimaryButton
from paskanet.ui.components.cards import Card, MetricCard
from paskanet.ui.components.log_view import LogView

__all__ = ["PrimaryButton", "Card", "MetricCard", "LogView"]
