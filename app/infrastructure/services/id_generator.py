"""Document id generator (IIdGenerator) producing CUID2 ids."""

from cuid2 import cuid_wrapper


class CuidIdGenerator:
    """Collision-resistant, URL-safe ids (CUID2).

    CUID2 ids are lowercase alphanumeric, so they never need escaping in
    URLs or pagination cursors.
    """

    def __init__(self) -> None:
        self._generator = cuid_wrapper()

    def generate(self) -> str:
        result = self._generator()
        if not isinstance(result, str):
            raise TypeError(
                f"Expected str from cuid generator, got {type(result).__name__}"
            )
        return result
