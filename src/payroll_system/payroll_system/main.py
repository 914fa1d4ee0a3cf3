from __future__ import annotations

import importlib
import logging
import sys
from types import ModuleType
from typing import Optional, TextIO

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings: ModuleType) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=getattr(settings, "LOG_FORMAT", logging.BASIC_FORMAT),
        stream=sys.stderr,
    )


def create_app(*, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> Container:
    settings = load_settings()
    configure_logging(settings)

    if bool(getattr(settings, "DEBUG", False)):
        logger.debug("settings=%s log_level=%s", settings.__name__, getattr(settings, "LOG_LEVEL", None))

    return build_container(stdin=stdin, stdout=stdout)


def main(*, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    container = create_app(stdin=stdin, stdout=stdout)
    return container.menu_controller.run()
