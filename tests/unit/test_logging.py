import logging

from versync.utils.logging import get_logger, verbosity_to_level


def test_verbosity_levels_are_clamped():
    assert verbosity_to_level(-1) == logging.CRITICAL
    assert verbosity_to_level(0) == logging.CRITICAL
    assert verbosity_to_level(3) == logging.INFO
    assert verbosity_to_level(4) == logging.DEBUG
    assert verbosity_to_level(10) == logging.DEBUG


def test_get_logger_sets_level_only_when_asked():
    logger = get_logger("versync.tests.quiet", verbosity=1)
    assert logger.level == logging.ERROR

    assert get_logger("versync.tests.untouched").level == logging.NOTSET
