import logging

from gedcom_tree.config import TreeConfig
from gedcom_tree.logging import BASE_LOGGER_NAME, LogSettings, get_logger, qualified_name
from gedcom_tree.logging.logger import PROJECT_ROOT


def test_qualified_name_nests_under_base():
    assert qualified_name(None) == "gedcom_tree"
    assert qualified_name("pipeline") == "gedcom_tree.pipeline"
    assert qualified_name("gedcom_tree.graph.layout") == "gedcom_tree.graph.layout"


def test_module_logger_inherits_base_handlers():
    logger = get_logger("gedcom_tree.loader.tokenizer")

    assert logger.name == "gedcom_tree.loader.tokenizer"
    assert logger.propagate is True
    assert get_logger() is logging.getLogger(BASE_LOGGER_NAME)


def test_settings_defaults():
    settings = LogSettings.from_config(TreeConfig({}))

    assert settings.level == logging.INFO
    assert settings.console_level == logging.WARNING
    assert settings.log_dir == PROJECT_ROOT / "logs"
    assert settings.to_file is True
    assert settings.module_files is False


def test_settings_debug_forces_debug_level(tmp_path):
    cfg = TreeConfig({"debug": True, "logging": {"level": "error", "dir": str(tmp_path)}})
    settings = LogSettings.from_config(cfg)

    assert settings.level == logging.DEBUG
    assert settings.console_level == logging.DEBUG
    assert settings.log_dir == tmp_path


def test_settings_level_from_config():
    cfg = TreeConfig({"logging": {"level": "error", "to_file": False, "rotate": True}})
    settings = LogSettings.from_config(cfg)

    assert settings.level == logging.ERROR
    assert settings.to_file is False
    assert settings.rotate is True
