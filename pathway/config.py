from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    """
    Centralized application settings. Pydantic's BaseSettings will automatically
    load these from environment variables or a .env file.
    """
    # --- LLM Models ---
    GENERATION_MODEL: str = Field("gemini-2.5-flash", description="The model used for intelligent resource discovery.")
    FAST_MODEL: str = Field("gemini-2.5-flash", description="The model for fast tasks like skill extraction.")

    # --- Google API Key ---
    GOOGLE_API_KEY: str = Field("", description="API key for the Gemini models. Intelligent search is skipped when empty.")

    # --- Discovery Timeouts (seconds) ---
    SEARCH_PROVIDER_TIMEOUT: float = Field(15.0, description="Timeout for a single intelligent search call.")
    SYNTHESIZED_STRATEGY_TIMEOUT: float = Field(5.0, description="Timeout for provider and aggregator-site strategies.")
    URL_VALIDATION_TIMEOUT: float = Field(5.0, description="Timeout for a single URL reachability check.")

    # --- Discovery Behaviour ---
    VALIDATE_URLS: bool = Field(True, description="Check every candidate URL before returning it. Disable for offline use.")
    ENABLE_INTELLIGENT_SEARCH: bool = Field(True, description="Include the LLM-backed search strategy.")
    PROVIDER_SEARCH_LIMIT: int = Field(5, description="How many roster providers the provider-targeted strategy queries.")
    MIN_VIABLE_RESOURCES: int = Field(3, description="Below this many candidates the curated table is merged in.")
    MAX_RESOURCES_PER_GAP: int = Field(3, description="Resources kept per skill gap after ranking.")

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", description="Level for the structured JSON logs.")

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

settings = Settings()
