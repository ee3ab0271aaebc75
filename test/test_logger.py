import logging

from insights.logger import setup_logger


def test_file_handler_added_on_later_call(tmp_path):
    log_file = tmp_path / "insights.log"
    setup_logger()
    logger = setup_logger(log_file=str(log_file))

    assert sum(type(h) is logging.StreamHandler for h in logger.handlers) == 1
    assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1

    # Repetir la llamada no duplica handlers
    setup_logger(log_file=str(log_file))
    assert len(logger.handlers) == 2

    logging.getLogger("insights.test").info("hola")
    for h in logger.handlers:
        h.flush()
    assert "hola" in log_file.read_text(encoding="utf-8")
