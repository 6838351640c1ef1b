"""Communication with the dog API at https://dog.ceo/api/.

This API is able to give information about known dog breeds and their local
breed variants (aka sub-breeds) and also dog pictures! The API documentation
is available at https://dog.ceo/dog-api/documentation/.

Every call may raise one of the `dog_ceo_errors.DogApiError` subclasses:
`TransportError`, `DecodeError` or `ApiError`.

"""

import urllib.parse
from typing import Any

import requests

from dog_ceo_envelope import PayloadShape, decode_dynamic, decode_fixed
from dog_ceo_settings import API_ROOT_DEFAULT, DogCeoSettings
from web_api import BasicWebApi

# Path templates relative to the API root, keyed by operation name
ENDPOINTS = {
    'random_image': 'breeds/image/random',
    'multiple_random_images': 'breeds/image/random/{count}',
    'random_image_by_breed': 'breed/{breed}/images/random',
    'multiple_random_images_by_breed': 'breed/{breed}/images/random/{count}',
    'random_image_by_sub_breed': 'breed/{breed}/{sub_breed}/images/random',
    'multiple_random_images_by_sub_breed':
        'breed/{breed}/{sub_breed}/images/random/{count}',
    'images_by_breed': 'breed/{breed}/images',
    'images_by_sub_breed': 'breed/{breed}/{sub_breed}/images',
    'breeds_list': 'breeds/list/all',
    'sub_breeds_list': 'breed/{breed}/list',
}


def _path_segment(value: str | int) -> str:
    """Internal helper to turn a parameter into a single path segment."""
    if isinstance(value, str):
        value = value.strip()
    return urllib.parse.quote(str(value), safe='')


def build_endpoint(operation: str, **params: str | int) -> str:
    """Construct the endpoint path of an operation.

    Breed and sub-breed names are stripped of surrounding whitespace.

    Args:
        operation (str): Operation name, a key of `ENDPOINTS`.
        **params (str | int): Values for the template placeholders.

    Returns:
        str: The path relative to the API root URL.

    Raises:
        KeyError: unknown operation or missing parameter.
    """
    template = ENDPOINTS[operation]
    segments = {name: _path_segment(value) for name, value in params.items()}
    return template.format(**segments)


class DogCeoApi(BasicWebApi):
    """A class which instance communicates with the dog API."""

    API_ROOT_DEFAULT = API_ROOT_DEFAULT

    def __init__(
        self,
        *,
        api_root: str = API_ROOT_DEFAULT,
        request_timeout: float | tuple[float, float] | None = None,
        session: requests.Session | None = None
    ):
        """Initialize a dog API instance.

        Args:
            api_root (str): Optional override for the API root URL.
            request_timeout (float | tuple[float, float] | None): Optional
                request timeout. None means no timeout.
            session (requests.Session | None): Optional HTTP session
                to reuse.
        """
        super().__init__(
            api_root=api_root,
            request_timeout=request_timeout,
            session=session
        )

    @classmethod
    def from_settings(
        cls,
        settings: DogCeoSettings | None = None,
    ) -> 'DogCeoApi':
        """Create a dog API instance configured from the environment.

        Args:
            settings (DogCeoSettings | None): Parameters to use. None means
                load them from the environment and the .env file.
        """
        if settings is None:
            settings = DogCeoSettings()
        return cls(
            api_root=settings.api_root,
            request_timeout=settings.request_timeout,
        )

    def random_image(self) -> str:
        """Return a random image URL from all dogs collection."""
        return self._get_fixed('random_image')

    def multiple_random_images(self, count: int) -> list[str]:
        """Return list of random image URLs from all dogs collection.

        The API returns at most 50 images, `count` is passed as is.

        Args:
            count (int): Image count to request.
        """
        return self._get_dynamic(
            PayloadShape.STRING_ARRAY,
            'multiple_random_images',
            count=count,
        )

    def random_image_by_breed(self, breed: str) -> str:
        """Return a random image URL for a specified breed.

        Args:
            breed (str): Dog breed name, e.g. hound.
        """
        return self._get_fixed('random_image_by_breed', breed=breed)

    def multiple_random_images_by_breed(
        self,
        breed: str,
        count: int,
    ) -> list[str]:
        """Return list of random image URLs for a specified breed.

        Args:
            breed (str): Dog breed name.
            count (int): Image count to request.
        """
        return self._get_dynamic(
            PayloadShape.STRING_ARRAY,
            'multiple_random_images_by_breed',
            breed=breed,
            count=count,
        )

    def random_image_by_sub_breed(self, breed: str, sub_breed: str) -> str:
        """Return a random image URL for a specified sub-breed.

        Args:
            breed (str): Dog breed name, e.g. hound.
            sub_breed (str): Dog sub-breed name, e.g. afghan.
        """
        return self._get_fixed(
            'random_image_by_sub_breed',
            breed=breed,
            sub_breed=sub_breed,
        )

    def multiple_random_images_by_sub_breed(
        self,
        breed: str,
        sub_breed: str,
        count: int,
    ) -> list[str]:
        """Return list of random image URLs for a specified sub-breed.

        Args:
            breed (str): Dog breed name.
            sub_breed (str): Dog sub-breed name.
            count (int): Image count to request.
        """
        return self._get_dynamic(
            PayloadShape.STRING_ARRAY,
            'multiple_random_images_by_sub_breed',
            breed=breed,
            sub_breed=sub_breed,
            count=count,
        )

    def images_by_breed(self, breed: str) -> list[str]:
        """Return list of all image URLs for a specified breed.

        Args:
            breed (str): Dog breed name.
        """
        return self._get_dynamic(
            PayloadShape.STRING_ARRAY,
            'images_by_breed',
            breed=breed,
        )

    def images_by_sub_breed(self, breed: str, sub_breed: str) -> list[str]:
        """Return list of all image URLs for a specified sub-breed.

        Args:
            breed (str): Dog breed name.
            sub_breed (str): Dog sub-breed name.
        """
        return self._get_dynamic(
            PayloadShape.STRING_ARRAY,
            'images_by_sub_breed',
            breed=breed,
            sub_breed=sub_breed,
        )

    def breeds_list(self) -> dict[str, list[str] | None]:
        """Return a dictionary with all available dog breeds with their
        respective sub-breeds. A breed without sub-breeds maps to None.
        """
        return self._get_dynamic(
            PayloadShape.STRING_TO_OPTIONAL_STRING_ARRAY_MAP,
            'breeds_list',
        )

    def sub_breeds_list(self, breed: str) -> list[str] | None:
        """Return list of sub-breeds of a breed, or None if it has none.

        Args:
            breed (str): Dog breed name.
        """
        return self._get_dynamic(
            PayloadShape.OPTIONAL_STRING_ARRAY,
            'sub_breeds_list',
            breed=breed,
        )

    def _get_fixed(self, operation: str, **params: str | int) -> str:
        """Internal helper to call an endpoint whose `message` is
        always a string.
        """
        body = self._get_text(build_endpoint(operation, **params))
        return decode_fixed(body)

    def _get_dynamic(
        self,
        shape: PayloadShape,
        operation: str,
        **params: str | int
    ) -> Any:
        """Internal helper to call an endpoint whose `message` type
        differs between success and failure.

        Args:
            shape (PayloadShape): Expected `message` type on success.
            operation (str): Operation name, a key of `ENDPOINTS`.
        """
        body = self._get_text(build_endpoint(operation, **params))
        return decode_dynamic(body, shape)


# Shortcuts performing a single call with a client configured
# from the environment


def random_image() -> str:
    """Return a random image URL from all dogs collection."""
    with DogCeoApi.from_settings() as api:
        return api.random_image()


def multiple_random_images(count: int) -> list[str]:
    """Return list of random image URLs from all dogs collection."""
    with DogCeoApi.from_settings() as api:
        return api.multiple_random_images(count)


def random_image_by_breed(breed: str) -> str:
    """Return a random image URL for a specified breed."""
    with DogCeoApi.from_settings() as api:
        return api.random_image_by_breed(breed)


def multiple_random_images_by_breed(breed: str, count: int) -> list[str]:
    """Return list of random image URLs for a specified breed."""
    with DogCeoApi.from_settings() as api:
        return api.multiple_random_images_by_breed(breed, count)


def random_image_by_sub_breed(breed: str, sub_breed: str) -> str:
    """Return a random image URL for a specified sub-breed."""
    with DogCeoApi.from_settings() as api:
        return api.random_image_by_sub_breed(breed, sub_breed)


def multiple_random_images_by_sub_breed(
    breed: str,
    sub_breed: str,
    count: int,
) -> list[str]:
    """Return list of random image URLs for a specified sub-breed."""
    with DogCeoApi.from_settings() as api:
        return api.multiple_random_images_by_sub_breed(breed, sub_breed, count)


def images_by_breed(breed: str) -> list[str]:
    """Return list of all image URLs for a specified breed."""
    with DogCeoApi.from_settings() as api:
        return api.images_by_breed(breed)


def images_by_sub_breed(breed: str, sub_breed: str) -> list[str]:
    """Return list of all image URLs for a specified sub-breed."""
    with DogCeoApi.from_settings() as api:
        return api.images_by_sub_breed(breed, sub_breed)


def breeds_list() -> dict[str, list[str] | None]:
    """Return a dictionary with all dog breeds and their sub-breeds."""
    with DogCeoApi.from_settings() as api:
        return api.breeds_list()


def sub_breeds_list(breed: str) -> list[str] | None:
    """Return list of sub-breeds of a breed, or None if it has none."""
    with DogCeoApi.from_settings() as api:
        return api.sub_breeds_list(breed)
