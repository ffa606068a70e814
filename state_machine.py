from enum import Enum

class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"

class MatchAnalyzerStateMachine:
    def __init__(self):
        self.state = RequestStatus.IDLE
        self.transitions = {
            RequestStatus.IDLE: {
                "submit": (RequestStatus.LOADING, "Analyzing resume against job description..."),
                "invalid_input": (RequestStatus.ERROR, "Inputs rejected before sending."),
            },
            RequestStatus.LOADING: {
                "analysis_complete": (RequestStatus.SUCCESS, "Analysis complete."),
                "error": (RequestStatus.ERROR, "Analysis failed."),
            },
            RequestStatus.SUCCESS: {
                "submit": (RequestStatus.LOADING, "Re-analyzing with the current inputs..."),
                "invalid_input": (RequestStatus.ERROR, "Inputs rejected before sending."),
                "reset": (RequestStatus.IDLE, "Starting over..."),
            },
            RequestStatus.ERROR: {
                "submit": (RequestStatus.LOADING, "Retrying analysis..."),
                "invalid_input": (RequestStatus.ERROR, "Inputs rejected before sending."),
                "reset": (RequestStatus.IDLE, "Starting over..."),
            },
        }

    def can(self, event):
        return event in self.transitions.get(self.state, {})

    def next(self, event):
        if self.can(event):
            next_state, message = self.transitions[self.state][event]
            self.state = next_state
            return message
        else:
            return f"Event: '{event}' -> is not valid for actual state: '{self.state.value}'."

    @property
    def is_loading(self):
        return self.state == RequestStatus.LOADING

    def reset(self):
        self.state = RequestStatus.IDLE
