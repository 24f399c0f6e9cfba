class ProviderError(RuntimeError):
    def __init__(self, message: str, *, code: str = "provider_error"):
        super().__init__(message)
        self.code = code


class NoProviderConfigured(ProviderError):
    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "No AI providers configured. Set OPENAI_API_KEY, ANTHROPIC_API_KEY, or GOOGLE_API_KEY",
            code="no_provider_configured",
        )


class ProviderCallFailed(ProviderError):
    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider} research call failed: {message}", code="provider_call_failed")
        self.provider = provider
