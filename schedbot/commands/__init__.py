from typing import Callable, Dict

from ..errors import ErrorType
from ..nlp.intents import Intent
from .export import handle_export
from .general import handle_ambiguous, handle_help, handle_unknown
from .manage import handle_add, handle_delete, handle_edit
from .query import handle_reminder, handle_search
from .results import CommandContext, Handled, HandledWithMutation, HandlerResult, NoMatch
from .view import handle_stats, handle_view

Handler = Callable[[CommandContext], HandlerResult]

COMMAND_HANDLERS: Dict[Intent, Handler] = {
    Intent.HELP: handle_help,
    Intent.STATS: handle_stats,
    Intent.EXPORT: handle_export,
    Intent.REMINDER: handle_reminder,
    Intent.VIEW: handle_view,
    Intent.DELETE: handle_delete,
    Intent.EDIT: handle_edit,
    Intent.SEARCH: handle_search,
    Intent.ADD: handle_add,
    Intent.AMBIGUOUS: handle_ambiguous,
    Intent.UNKNOWN: handle_unknown,
}

# Reply used when an intent's own argument pattern fails to match.
NOT_RECOGNIZED: Dict[Intent, ErrorType] = {
    Intent.ADD: ErrorType.ADD_NOT_RECOGNIZED,
    Intent.EDIT: ErrorType.EDIT_NOT_RECOGNIZED,
    Intent.DELETE: ErrorType.DELETE_NOT_RECOGNIZED,
    Intent.SEARCH: ErrorType.SEARCH_NOT_RECOGNIZED,
}

_missing = set(Intent) - set(COMMAND_HANDLERS)
if _missing:
    raise RuntimeError(f"No command handler for intents: {sorted(intent.value for intent in _missing)}")

__all__ = [
    "COMMAND_HANDLERS",
    "NOT_RECOGNIZED",
    "CommandContext",
    "Handled",
    "HandledWithMutation",
    "HandlerResult",
    "NoMatch",
]
