from pydantic_settings import BaseSettings, SettingsConfigDict

# Reserved names of the hidden store layout
HIDDEN_FOLDER = ".latexoptimizer"
PLACEHOLDER_IMAGE = "placeholder.png"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LATEXOPTIMIZER_")

    # Placeholder image settings
    placeholder_size: int = 100
    placeholder_color: tuple[int, int, int] = (200, 200, 200)

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
