import io
import logging

from tailwind_translator.core.logger import ROOT_LOGGER_NAME, configure_logging, get_logger


class TestGetLogger:
    def test_package_module_name_kept(self):
        assert get_logger("tailwind_translator.core.config").name == "tailwind_translator.core.config"

    def test_foreign_name_nested(self):
        assert get_logger("plugin").name == "tailwind_translator.plugin"

    def test_root(self):
        assert get_logger().name == ROOT_LOGGER_NAME


class TestConfigureLogging:
    def test_verbose_level_and_output(self):
        stream = io.StringIO()
        root = configure_logging(verbose=True, stream=stream)
        assert root.level == logging.DEBUG
        get_logger("tailwind_translator.core.test").debug("hello %s", "there")
        assert "hello there" in stream.getvalue()

    def test_default_level_hides_debug(self):
        stream = io.StringIO()
        configure_logging(stream=stream)
        log = get_logger("tailwind_translator.core.test")
        log.debug("hidden")
        log.info("shown")
        assert "hidden" not in stream.getvalue()
        assert "INFO: shown" in stream.getvalue()

    def test_repeated_calls_keep_one_handler(self):
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        root = logging.getLogger(ROOT_LOGGER_NAME)
        tagged = [h for h in root.handlers if getattr(h, "_tailwind_translator", False)]
        assert len(tagged) == 1
