"""Load text resources shipped inside importable packages."""

from __future__ import annotations

from importlib import resources
import logging

from commonext.config import Config
from commonext.errors import ResourceError

logger = logging.getLogger(__name__)


def get_embedded_resource(package: str, name: str, *, config: Config | None = None) -> str:
    """Return the text of resource *name* inside *package*.

    Args:
        package: Dotted name of an importable package, e.g. ``"myapp.templates"``.
        name: Resource path relative to the package, ``/``-separated.
        config: Supplies the text encoding. Defaults to ``Config()``.

    Raises:
        ResourceError: The package cannot be imported or the resource is missing.
    """
    cfg = config or Config()
    try:
        root = resources.files(package)
    except ModuleNotFoundError as exc:
        if exc.name != package and not package.startswith(f"{exc.name}."):
            raise ResourceError(
                f"Package {package} could not be imported: {exc}",
                hint=f"Install the missing module {exc.name!r}.",
            ) from exc
        raise ResourceError(
            f"Package not found: {package}",
            hint="Pass the dotted name of an importable package.",
        ) from exc
    except ImportError as exc:
        raise ResourceError(f"Package {package} could not be imported: {exc}") from exc

    resource = root.joinpath(*name.split("/"))
    if not resource.is_file():
        raise ResourceError(f"Resource not found: {package}/{name}")

    logger.debug("Loading resource %s/%s (%s)", package, name, cfg.encoding)
    return resource.read_text(encoding=cfg.encoding)
