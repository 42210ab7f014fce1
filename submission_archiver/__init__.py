"""Core package for the submission archiver.

Loads the archiver configuration and prepares its state directory; the
fetch, archive and commit stages consume the resulting :class:`RootConfig`.
"""

__all__: list[str] = []
