"""Orchestrator job completion handler package."""
