"""Dog API client parameters loaded from the environment.

See .env.example file for variable description.

"""

from pydantic_settings import BaseSettings, SettingsConfigDict

API_ROOT_DEFAULT = 'https://dog.ceo/api/'


class DogCeoSettings(BaseSettings):
    """Dog API client parameters loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix='DOG_CEO_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    api_root: str = API_ROOT_DEFAULT

    # None keeps the requests default: wait for the response forever
    request_timeout: float | None = None
