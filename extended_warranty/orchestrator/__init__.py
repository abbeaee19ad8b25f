"""Orchestrator Package - Extended warranty pipeline."""

from .warranty_orchestrator import WarrantyOrchestrator

__all__ = ["WarrantyOrchestrator"]
