"""Agent Ledger - workspace-scoped agent event history."""

__version__ = "1.0.0"
