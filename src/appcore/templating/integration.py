"""Kida environment setup.

Creates a kida Environment from AppConfig. The environment is created
once when the AppCore is built and reused for every render.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from appcore.config import AppConfig
from appcore.templating.filters import BUILTIN_FILTERS


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    ``config.template_dir`` (when set) is searched before the templates
    bundled with appcore, so an application can override the bootstrap
    page without forking the package.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("appcore", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
    env.update_filters(BUILTIN_FILTERS)
    return env
