"""Adapter layer package for host API integration boundaries."""

from .command_api import CommandApiJobHistoryAdapter
from .command_api_errors import (
	CommandApiConnectionError,
	CommandApiError,
	CommandApiStatusError,
	CommandApiTimeoutError,
)
from .interfaces import JobHistoryFetchResult, JobHistoryPort

__all__ = [
	"CommandApiConnectionError",
	"CommandApiError",
	"CommandApiJobHistoryAdapter",
	"CommandApiStatusError",
	"CommandApiTimeoutError",
	"JobHistoryFetchResult",
	"JobHistoryPort",
]
