import logging
from typing import Callable, Dict, Optional

from exceptions import InputValidationError, MatchAnalysisError, MissingCredentialError
from file_management import api_key_env_name, load_sample_data, resolve_api_key
from llm_agent import GeminiMatchAgent
from models import AnalysisResult, InputState
from state_machine import MatchAnalyzerStateMachine, RequestStatus

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please provide both resume and job description"


class MatchAnalyzer:
    """Holds the form inputs and drives one analysis at a time.

    ``submit`` validates and moves to loading, ``run_pending`` performs the
    single outbound request. They are split so a UI can render the loading
    state (disabled trigger) before the blocking call starts.
    """

    def __init__(
        self,
        config: Dict,
        agent_factory: Callable[..., GeminiMatchAgent] = GeminiMatchAgent,
        api_key_resolver: Callable[[Dict], Optional[str]] = resolve_api_key,
        sample_loader: Callable[[], tuple] = load_sample_data,
    ):
        self.config = config
        self.agent_factory = agent_factory
        self.api_key_resolver = api_key_resolver
        self.sample_loader = sample_loader
        self.machine = MatchAnalyzerStateMachine()
        self.inputs = InputState()
        self.result: Optional[AnalysisResult] = None
        self.error_message = ""
        self._api_key: Optional[str] = None

    @property
    def status(self) -> RequestStatus:
        return self.machine.state

    @property
    def is_loading(self) -> bool:
        return self.machine.is_loading

    def update_inputs(self, resume: str, job_description: str):
        self.inputs = InputState(resume=resume, job_description=job_description)

    def load_sample_data(self):
        resume_text, job_description = self.sample_loader()
        self.update_inputs(resume_text, job_description)
        logger.info("Sample data loaded")

    def _validate(self) -> str:
        if not self.inputs.is_complete():
            raise InputValidationError(MISSING_INPUT_MESSAGE)
        api_key = self.api_key_resolver(self.config)
        if not api_key:
            env_name = api_key_env_name(self.config)
            raise MissingCredentialError(
                f"API key not found. Set {env_name} in the environment or a .env file"
            )
        return api_key

    def submit(self) -> bool:
        """Returns True when a request is now pending."""
        if self.is_loading:
            logger.debug("Analysis already in flight, ignoring submit")
            return False

        try:
            api_key = self._validate()
        except MatchAnalysisError as e:
            self.result = None
            self.error_message = str(e)
            self.machine.next("invalid_input")
            logger.warning("Analysis rejected: %s", e)
            return False

        self._api_key = api_key
        self.result = None
        self.error_message = ""
        self.machine.next("submit")
        return True

    def run_pending(self) -> RequestStatus:
        if not self.is_loading:
            return self.status

        try:
            agent = self.agent_factory(self._api_key, self.config.get("gemini", {}))
            self.result = agent.analyze_match(self.inputs.resume, self.inputs.job_description)
            self.machine.next("analysis_complete")
        except MatchAnalysisError as e:
            logger.exception("Match analysis failed")
            self._fail(str(e))
        except Exception as e:
            # Anything unexpected still has to leave the loading state
            logger.exception("Unexpected error during match analysis")
            self._fail(str(e) or e.__class__.__name__)
        finally:
            self._api_key = None
        return self.status

    def _fail(self, message: str):
        self.result = None
        self.error_message = message
        self.machine.next("error")

    def analyze(self) -> RequestStatus:
        if self.submit():
            return self.run_pending()
        return self.status

    def reset(self) -> bool:
        """Back to idle with inputs kept. Refused while a request is in flight."""
        if not self.machine.can("reset"):
            logger.debug("Ignoring reset in state %s", self.status.value)
            return False
        self.result = None
        self.error_message = ""
        self.machine.next("reset")
        return True
