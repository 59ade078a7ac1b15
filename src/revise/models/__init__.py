"""Data models for cards, card sets, diagnostics and configuration."""

from revise.models.card import Card, CardSet
from revise.models.config import CheckConfig
from revise.models.diagnostic import Diagnostic, DiagnosticKind, Severity, Span

__all__ = [
    "Card",
    "CardSet",
    "CheckConfig",
    "Diagnostic",
    "DiagnosticKind",
    "Severity",
    "Span",
]
