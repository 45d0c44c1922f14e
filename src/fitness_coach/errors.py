"""Exception hierarchy for fitness-coach."""


class FitnessCoachError(Exception):
    """Base class for all fitness-coach errors."""


class UpstreamServiceError(FitnessCoachError):
    """An external service failed: network error, timeout or non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeError(FitnessCoachError):
    """An external service answered, but not in the expected shape."""


class MissingCredentialError(FitnessCoachError):
    """No API key is configured for the service."""

    def __init__(self, service: str):
        super().__init__(f"No API key configured for {service}")
        self.service = service


class PlanProviderError(FitnessCoachError):
    """Plan generation failed upstream."""


class PlanUpstreamError(PlanProviderError, UpstreamServiceError):
    pass


class PlanParseError(PlanProviderError, ResponseShapeError):
    pass


class PlanCredentialError(PlanProviderError, MissingCredentialError):
    pass


class SpeechSynthesisError(FitnessCoachError):
    """Speech synthesis failed; there is no audio to return."""


class SpeechUpstreamError(SpeechSynthesisError, UpstreamServiceError):
    pass


class SpeechCredentialError(SpeechSynthesisError, MissingCredentialError):
    pass
