class UnwrapError(TypeError):
    """Raised when a value is extracted from a `Result` or `Option` that does not hold one.

    The payload that prevented the extraction is kept on `cause`, whatever its type.

    Python only accepts exceptions as `__cause__`, so when the payload is an exception it is also chained there by the raising code.

    Args:
        message (str): Description of the failed extraction.
        cause (object): The error payload of the `Err`, or a message describing the absence for `NONE`.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> try:
    ...     pr.result.unwrap(pr.Err("disk full"))
    ... except pr.UnwrapError as exc:
    ...     exc.cause
    'disk full'

    ```
    """

    cause: object

    def __init__(self, message: str, cause: object) -> None:
        super().__init__(message)
        self.cause = cause
