import json
import logging
import sys

import requests

logger = logging.getLogger(__name__)

API_URL = "https://randomuser.me/api/"


class FetchError(Exception):
    """Base class for failures while fetching a user."""


class NetworkError(FetchError):
    pass


class HttpStatusError(FetchError):
    def __init__(self, status_code):
        super().__init__(f"HTTP error! Status: {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    pass


def fetch_first_user():
    """Fetch the envelope from API_URL and return ``results[0]``.

    Raises NetworkError, HttpStatusError or DecodeError.
    """
    logger.info("Requesting %s", API_URL)
    try:
        response = requests.get(API_URL)
    except requests.RequestException as e:
        raise NetworkError(f"Request failed: {e}") from e

    logger.info("Received status %s", response.status_code)
    if not 200 <= response.status_code < 300:
        raise HttpStatusError(response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON body: {e}") from e

    try:
        return data["results"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise DecodeError(f"Unexpected envelope, no results[0]: {e!r}") from e


def print_user(user):
    print(json.dumps(user, indent=2, ensure_ascii=False))


def run():
    try:
        user = fetch_first_user()
    except FetchError as e:
        logger.debug("Fetch failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return
    print_user(user)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")
    run()


if __name__ == "__main__":
    main()
