"""Job layer package for completion dispatch and category handlers."""

from .bridge import AsyncWorkBridge
from .dispatcher import CompletionDispatcher, DispatcherConfig, job_classify_job_type
from .errors import CompletionHandlerError, DispatchTimeoutError, HandlerExecutionError
from .interfaces import CategoryHandlerPort, JobCompletionHandlerPort
from .inventory import InventoryCompletionHandler
from .management import ManagementCompletionHandler
from .preconditions import job_require_successful_result
from .reenrollment import ReenrollmentCompletionHandler

__all__ = [
	"AsyncWorkBridge",
	"CategoryHandlerPort",
	"CompletionDispatcher",
	"CompletionHandlerError",
	"DispatchTimeoutError",
	"DispatcherConfig",
	"HandlerExecutionError",
	"InventoryCompletionHandler",
	"JobCompletionHandlerPort",
	"ManagementCompletionHandler",
	"ReenrollmentCompletionHandler",
	"job_classify_job_type",
	"job_require_successful_result",
]
