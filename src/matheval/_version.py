"""Package version lookup."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version of the installed matheval distribution."""
    try:
        return version("matheval")
    except PackageNotFoundError:
        # Running from a source checkout without an install
        return "0.0.0.dev0"
