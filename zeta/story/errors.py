"""
Story flow exceptions.

Two families:
- GenerationError: failures of the outbound story request. Recovered by the
  coordinator into a failure result, never propagated to the presentation
  layer.
- WizardError: invalid use of the questionnaire (bad transition, missing or
  unknown selection). Propagated to the caller.
"""


class StoryError(Exception):
    """Base exception for all story flow errors."""
    pass


class GenerationError(StoryError):
    """Base exception for story generation failures."""

    kind = "generation"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(GenerationError):
    """
    Raised when no usable API credential is available.

    Detected before any network attempt.
    """

    kind = "configuration"


class TransportError(GenerationError):
    """Raised for network-level failures (unreachable host, timeout, bad URL)."""

    kind = "transport"


class ResponseParseError(GenerationError):
    """
    Raised when the response body does not carry generated text at
    candidates[0].content.parts[0].text.
    """

    kind = "response_parse"


class WizardError(StoryError):
    """Base exception for questionnaire misuse."""
    pass


class InvalidTransitionError(WizardError):
    """
    Raised when an action is not valid for the current step.

    Examples:
    - next_step() on the terminal step
    - advance() on the preview step
    - any action after the flow has exited
    """
    pass


class MissingSelectionError(WizardError):
    """Raised when advancing without a selection for the current step."""

    def __init__(self, step: str):
        self.step = step
        super().__init__(f"A selection is required to continue from step '{step}'")


class UnknownOptionError(WizardError):
    """Raised when a selection is not an identifier of the step's catalog."""

    def __init__(self, step: str, option_id: str):
        self.step = step
        self.option_id = option_id
        super().__init__(f"Unknown option '{option_id}' for step '{step}'")
