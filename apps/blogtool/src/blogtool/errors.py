"""Error types for blog-tool."""


class BlogToolError(RuntimeError):
    """Base class for blog-tool errors."""


class ConfigDirError(BlogToolError):
    """Raised when the per-user config directory cannot be determined."""


class ConfigReadError(BlogToolError):
    """Raised when the config file is missing or cannot be decoded."""


class ConfigWriteError(BlogToolError):
    """Raised when the config file cannot be written."""


class FileReadError(BlogToolError):
    """Raised when the file to push cannot be read."""


class RequestBuildError(BlogToolError):
    """Raised when the request body cannot be serialized."""


class NetworkError(BlogToolError):
    """Raised when the request could not be sent."""


class RemoteAPIError(BlogToolError):
    """Raised when GitHub answers with a failure status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"GitHub returned status {status_code}")
        self.status_code = status_code
        self.body = body
