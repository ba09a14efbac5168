"""Push a single local file to GitHub through the Contents API."""

import base64
import logging
from pathlib import Path

import click
import httpx

from gh import ContentsPutRequest, GitHubClient

from .errors import FileReadError, NetworkError, RemoteAPIError, RequestBuildError
from .models import Configuration, PushOptions

logger = logging.getLogger(__name__)

# Anything above this counts as a failure, so 251-299 fail too.
SUCCESS_THRESHOLD = 250


def resolve(
    config: Configuration, options: PushOptions, file_name: str
) -> tuple[Configuration, ContentsPutRequest]:
    """
    Merge command line overrides over the stored configuration.

    Overrides only apply to the returned copy; the stored configuration is
    left untouched. A notice is printed for every request field that falls
    back to its default.

    Returns:
        Effective configuration and a request still missing its content
    """
    overrides = {
        "repository": options.repository,
        "username": options.username,
        "access_token": options.token,
    }
    effective = config.model_copy(update={k: v for k, v in overrides.items() if v})
    name = Path(file_name).name

    if options.branch:
        branch = options.branch
    else:
        click.echo("Using default branch")
        branch = config.default_branch

    if options.path:
        remote_path = options.path
    else:
        click.echo("Path not provided, using default directory...")
        remote_path = f"{config.default_path}{name}"

    if options.message:
        message = options.message
    else:
        click.echo(f"Message not provided. Using {name}")
        message = name

    request = ContentsPutRequest(
        message=message,
        content="",
        sha=options.sha or None,
        branch=branch or None,
        path=remote_path,
    )
    return effective, request


def read_file(file_name: str) -> bytes:
    """Read the whole file into memory."""
    try:
        return Path(file_name).read_bytes()
    except OSError as e:
        raise FileReadError(str(e)) from e


def encode_content(data: bytes) -> str:
    """Standard padded base64, no line wrapping."""
    return base64.b64encode(data).decode("ascii")


def serialize(request: ContentsPutRequest) -> str:
    """Serialize the request body."""
    try:
        return request.to_json()
    except (TypeError, ValueError) as e:
        raise RequestBuildError(str(e)) from e


def send(
    config: Configuration,
    options: PushOptions,
    file_name: str,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Response:
    """
    Resolve, read, encode and PUT the file.

    Raises:
        FileReadError: the local file could not be read (nothing is sent)
        NetworkError: the request could not be sent
        RemoteAPIError: GitHub answered with a status above 250
    """
    effective, request = resolve(config, options, file_name)

    data = read_file(file_name)
    request.content = encode_content(data)
    logger.debug("Encoded %s (%d bytes)", file_name, len(data))

    try:
        body = serialize(request)
    except RequestBuildError as e:
        # The request is still sent, with an empty body.
        logger.error("Request body not built: %s", e)
        click.echo(f"couldn't form request, {e}")
        body = ""

    client = GitHubClient(
        username=effective.username,
        token=effective.access_token,
        transport=transport,
    )
    try:
        response = client.put_contents(
            effective.username, effective.repository, request.path, body
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NetworkError(str(e)) from e

    if response.status_code > SUCCESS_THRESHOLD:
        logger.info("GitHub returned status %d", response.status_code)
        raise RemoteAPIError(response.status_code, response.text)
    logger.info(
        "Pushed %s to %s/%s%s (status=%d)",
        file_name,
        effective.username,
        effective.repository,
        request.path,
        response.status_code,
    )
    return response


def push(
    config: Configuration,
    options: PushOptions,
    file_name: str,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run a push and report the outcome. Returns the process exit code."""
    try:
        send(config, options, file_name, transport=transport)
    except FileReadError as e:
        click.echo(f"couldn't read file, {e}\n\nExiting...")
        return 1
    except NetworkError as e:
        click.echo(f"couldn't send request, {e}")
        return 1
    except RemoteAPIError as e:
        click.echo(f"error received from github, {e.body}")
        return 1
    click.echo("success")
    return 0
