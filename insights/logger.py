import logging
import os
import sys

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def _has_console(logger):
    return any(type(h) is logging.StreamHandler for h in logger.handlers)


def _has_file(logger, log_file):
    path = os.path.abspath(log_file)
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == path for h in logger.handlers)


def setup_logger(level=logging.INFO, log_file=None):
    # Configurar el logger del paquete
    logger = logging.getLogger("insights")
    logger.setLevel(level)

    formatter = logging.Formatter(FORMAT)

    # Salida a consola (una sola vez, p.ej. main() llamado dos veces en tests)
    if not _has_console(logger):
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    # Salida a archivo (opcional)
    if log_file and not _has_file(logger, log_file):
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
