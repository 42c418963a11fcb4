import logging

import pytest

from tailwind_translator.core.config import TranslatorConfig
from tailwind_translator.core.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Drop handlers installed by configure_logging so streams don't leak between tests."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_tailwind_translator", False):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    return TranslatorConfig()


@pytest.fixture
def plain_config():
    """Config with the default scale tables switched off."""
    return TranslatorConfig(use_default_scale=False)
