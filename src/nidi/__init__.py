"""nidi: a CLI to config your laptop as code.

Only the dispatcher shell exists so far: the application descriptor,
its global flags and an (empty) table of pluggable commands.
"""

from nidi.version import __version__

__all__: list[str] = ["__version__"]
