# Cada módulo obtém seu logger via setup_logger(__name__).

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

# Pasta de logs internos; IMPULSE_LOG_DIR sobrescreve o padrão
LOG_DIR = Path(
    os.getenv("IMPULSE_LOG_DIR", str(Path(__file__).parent / "internallogs"))
)
LOG_DIR.mkdir(parents=True, exist_ok=True)


def setup_logger(name: str = "Impulse") -> logging.Logger:
    """
    Configura o logger para o Impulse Dashboard.

    Args:
        name (str): O nome do logger. Default é "Impulse".

    Returns:
        logging.Logger: O logger configurado.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Evita duplicidade de handlers se o logger for inicializado mais de uma vez
    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        # Console: INFO
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.INFO)
        logger.addHandler(console_handler)

        # Arquivo rotativo: DEBUG
        file_path = LOG_DIR / f"{name}.log"
        file_handler = RotatingFileHandler(
            filename=file_path,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=13,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)
    return logger


# Instância única para ser importada em outros módulos
logger = setup_logger()
