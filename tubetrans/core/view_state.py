"""
Transitions of the viewer state.

Each function takes the current ViewState and returns the next one, raising
StateTransitionError when the event is not accepted in that state.
"""

from tubetrans.models.schemas import AppStatus, TranscriptRecord, ViewState
from tubetrans.utils.error_handling import StateTransitionError


def idle() -> ViewState:
    return ViewState()


def _require(state: ViewState, status: AppStatus, event: str, translating: bool = None):
    if state.status != status or (translating is not None and state.is_translating != translating):
        raise StateTransitionError(
            f"'{event}' not allowed in state {state.status.value}"
            f" (translating={state.is_translating})"
        )


def start_loading(state: ViewState) -> ViewState:
    """Begin a new request; any previous record or error is dropped."""
    return ViewState(status=AppStatus.LOADING)


def load_succeeded(state: ViewState, record: TranscriptRecord) -> ViewState:
    _require(state, AppStatus.LOADING, "load_succeeded")
    return ViewState(status=AppStatus.SUCCESS, record=record)


def load_failed(state: ViewState, message: str) -> ViewState:
    _require(state, AppStatus.LOADING, "load_failed")
    return ViewState(status=AppStatus.ERROR, error_message=message)


def start_translation(state: ViewState) -> ViewState:
    _require(state, AppStatus.SUCCESS, "start_translation", translating=False)
    return state.model_copy(update={"is_translating": True})


def translation_succeeded(state: ViewState, record: TranscriptRecord) -> ViewState:
    _require(state, AppStatus.SUCCESS, "translation_succeeded", translating=True)
    return ViewState(status=AppStatus.SUCCESS, record=record)


def translation_failed(state: ViewState) -> ViewState:
    """Leave translating mode with the record untouched."""
    _require(state, AppStatus.SUCCESS, "translation_failed", translating=True)
    return state.model_copy(update={"is_translating": False})
