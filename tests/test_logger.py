import logging

from ods_styles.utils.logger import PACKAGE_LOGGER, get_logger, set_verbose


def test_get_logger_leaves_root_alone():
    root_handlers = list(logging.getLogger().handlers)
    log = get_logger("ods_styles.something")
    assert log.name == "ods_styles.something"
    assert logging.getLogger().handlers == root_handlers


def test_set_verbose_configures_package_logger_only():
    root_handlers = list(logging.getLogger().handlers)
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = list(logger.handlers)
    try:
        assert set_verbose(True) is logger
        set_verbose(True)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.DEBUG
        set_verbose(False)
        assert logger.level == logging.INFO
        assert logging.getLogger().handlers == root_handlers
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
