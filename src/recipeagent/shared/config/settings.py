from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8080", description="API bind address")
    SERVICE_NAME: str = Field(default="recipe-agent", description="Service name reported by /api/health")
    SERVICE_VERSION: str = Field(default="2.1.0", description="Service version reported by /api/health")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # LLM (OpenAI-compatible chat completions)
    OPENAI_API_KEY: str = Field(
        default="",
        description="Generative provider API key",
        validation_alias=AliasChoices("OPENAI_API_KEY", "DEEPSEEK_API_KEY"),
    )
    OPENAI_BASE_URL: str = Field(default="https://api.deepseek.com/v1", description="Generative provider base URL")
    CHAT_MODEL: str = Field(default="deepseek-chat", description="Chat model ID")
    MAX_TOKENS: int = Field(default=4096, description="Maximum token count")
    TEMPERATURE: float = Field(default=0.7, description="Temperature")
    LLM_MAX_CONCURRENCY: int = Field(default=10, description="Maximum concurrency for LLM requests")
    LLM_REQUEST_TIMEOUT: int = Field(default=90, description="LLM HTTP timeout (seconds)")

    # Recipe search
    SPOONACULAR_API_KEY: str = Field(default="", description="Spoonacular API key")
    SPOONACULAR_BASE_URL: str = Field(default="https://api.spoonacular.com/recipes", description="Spoonacular recipes URL")
    RECIPE_SEARCH_RESULTS: int = Field(default=5, description="Number of recipes requested per search")
    RECIPE_REQUEST_TIMEOUT: int = Field(default=30, description="Recipe search HTTP timeout (seconds)")

    # Cache (seconds)
    RECIPE_CACHE_TTL_INGREDIENTS: int = Field(default=30 * 60, description="TTL of ingredient search results")
    RECIPE_CACHE_TTL_DISH: int = Field(default=60 * 60, description="TTL of dish search results")
    RECIPE_CACHE_TTL_INFO: int = Field(default=60 * 60, description="TTL of single recipe lookups")
    TRANSLATION_CACHE_TTL: int = Field(default=24 * 60 * 60, description="TTL of generated translations")
    TRANSLATION_TIMEOUT: int = Field(default=10, description="Timeout of a single translation call (seconds)")
    CACHE_SWEEP_INTERVAL: int = Field(default=10 * 60, description="Seconds between cache sweeps, 0 disables")

    # Orchestration
    ORCHESTRATION_TIMEOUT: float = Field(default=120.0, description="Upper bound on waiting for both sources (seconds)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
